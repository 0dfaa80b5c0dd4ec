"""Exceptions raised by the media loader."""


class FetchFailure(Exception):
    """Raised by a media source when a page cannot be fetched"""
    pass


class UnknownCategoryError(KeyError):
    """Raised when a category id is not part of the configuration"""
    pass
