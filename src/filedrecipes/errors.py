class FiledRecipesError(Exception):
    pass


class ConfigError(FiledRecipesError):
    pass


class InvalidPathError(FiledRecipesError):
    pass


class RecipeFormatError(FiledRecipesError):
    pass


class OutOfRangeError(FiledRecipesError, IndexError):
    pass


class StorageError(FiledRecipesError):
    pass
