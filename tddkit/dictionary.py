"""A word dictionary with explicit errors for missing and duplicate words."""


class DictionaryError(Exception):
    message = "dictionary error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class WordNotFoundError(DictionaryError, LookupError):
    message = "could not find the word you were looking for"


class WordExistsError(DictionaryError):
    message = "the word already exists"


class WordDoesNotExistError(DictionaryError, LookupError):
    message = "the word not exists"


class Dictionary(dict):
    """Maps words to their definitions."""

    def search(self, word: str) -> str:
        if word not in self:
            raise WordNotFoundError()
        return self[word]

    def add(self, word: str, definition: str) -> None:
        if word in self:
            raise WordExistsError()
        self[word] = definition

    def update(self, word: str, definition: str) -> None:
        if word not in self:
            raise WordDoesNotExistError()
        self[word] = definition

    def delete(self, word: str) -> None:
        if word not in self:
            raise WordDoesNotExistError()
        del self[word]