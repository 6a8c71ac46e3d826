from typing import Final, Tuple

CATEGORIES: Final[Tuple[str, ...]] = ("breakfast", "lunch", "dinner")
DAYS: Final[Tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)
SLOTS_PER_PLAN: Final[int] = len(DAYS) * len(CATEGORIES)

NAME_PATTERN: Final[str] = r"[a-zA-Z\s]+"
INGREDIENTS_PATTERN: Final[str] = r"[a-zA-Z,\s]+"

# Console messages (printed verbatim)
MENU_PROMPT: Final[str] = "What would you like to do (add, show, plan, save, exit)?"
ADD_CATEGORY_PROMPT: Final[str] = "Which meal do you want to add (breakfast, lunch, dinner)?"
ADD_NAME_PROMPT: Final[str] = "Input the meal's name:"
ADD_INGREDIENTS_PROMPT: Final[str] = "Input the ingredients:"
MEAL_ADDED: Final[str] = "The meal has been added!"
SHOW_CATEGORY_PROMPT: Final[str] = "Which category do you want to print (breakfast, lunch, dinner)?"
NO_MEALS_FOUND: Final[str] = "No meals found."
WRONG_CATEGORY: Final[str] = "Wrong meal category! Choose from: breakfast, lunch, dinner."
WRONG_FORMAT: Final[str] = "Wrong format. Use letters only!"
MEAL_NOT_FOUND: Final[str] = "This meal doesn’t exist. Choose a meal from the list above."
CHOOSE_MEAL: Final[str] = "Choose the {category} for {day} from the list above:"
DAY_PLANNED: Final[str] = "Yeah! We planned the meals for {day}."
FILENAME_PROMPT: Final[str] = "Input a filename:"
SAVED: Final[str] = "Saved!"
UNABLE_TO_SAVE: Final[str] = "Unable to save. Plan your meals first."
SAVE_FAILED: Final[str] = "Unable to save. Could not write to {filename}."
STORAGE_FAILED: Final[str] = "Storage error: {error}"
BYE: Final[str] = "Bye!"
