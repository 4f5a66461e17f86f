"""Utility mixin classes"""

__all__ = ['ImmutableMixin', 'LoggingMixin']

import logging


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Provides a logger named after the implementing class, nested beneath the
    package logger so that it inherits its handler and level.
    """

    @property
    def logger(self) -> logging.Logger:
        _class = type(self)
        return logging.getLogger(f'{_class.__module__}.{_class.__qualname__}')


class ImmutableMixin:  # pylint: disable=too-few-public-methods
    """
    Rejects attribute assignment once the implementing class has called
    `_freeze()` at the end of its constructor.
    """

    _frozen: bool = False

    def __setattr__(self, key, value):
        if self._frozen:
            raise AttributeError(f'{type(self).__name__} objects are immutable')

        super().__setattr__(key, value)

    def __delattr__(self, key):
        if self._frozen:
            raise AttributeError(f'{type(self).__name__} objects are immutable')

        super().__delattr__(key)

    def _freeze(self):
        object.__setattr__(self, '_frozen', True)
