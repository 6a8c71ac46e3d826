"""
Export of the shopping list to a plain text file.
"""
import logging
from pathlib import Path
from typing import Iterable

from mealplanner.utilities.errors import ExportError

logger = logging.getLogger(__name__)


def export_shopping_list(lines: Iterable[str], filename: str, base_dir: Path = Path('.')) -> Path:
    """Append one line per entry to base_dir/filename, creating the file if missing."""
    output_path = Path(base_dir) / filename
    lines = list(lines)
    try:
        with open(output_path, 'a', encoding='utf-8') as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as e:
        logger.error(f"Export failed: {e}")
        raise ExportError(output_path, str(e)) from e
    logger.info(f"Exported {len(lines)} shopping list lines to {output_path}")
    return output_path


__all__ = ['export_shopping_list']
