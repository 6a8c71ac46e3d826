"""Exception hierarchy shared by the catalog, planner, store and console."""


class MealPlannerError(Exception):
    """Base class for all meal planner errors."""


class StorageError(MealPlannerError):
    """The backing store could not be read or written."""


class EmptyCategoryError(MealPlannerError):
    def __init__(self, category: str):
        super().__init__(f"No meal exists in category '{category}'")
        self.category = category


class NoPlanError(MealPlannerError):
    def __init__(self, message: str = "No complete plan to save"):
        super().__init__(message)


class PlanStateError(MealPlannerError):
    """A planner operation was called in the wrong lifecycle state."""


class ExportError(MealPlannerError):
    def __init__(self, filename, reason: str = ""):
        super().__init__(f"Could not write shopping list to {filename}: {reason}")
        self.filename = filename
