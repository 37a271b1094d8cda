# -*- coding: utf-8 -*-
"""
Base Controller
===============
Common signals and error handling for the wizard controllers.
"""

from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from services.error_mapper import map_exception
from services.exceptions import TRANSIENT_ERRORS
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: List[str] = None) -> 'OperationResult[T]':
        """Create a failed result."""
        return cls(success=False, message=message, errors=errors or [])


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Operation lifecycle signals
    - Loading state
    - Mapping of lookup failures to user messages
    """

    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    loading_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._is_loading = False
        self._last_error = ""

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def last_error(self) -> str:
        return self._last_error

    def _set_loading(self, loading: bool):
        if loading != self._is_loading:
            self._is_loading = loading
            self.loading_changed.emit(loading)

    def _emit_started(self, operation: str):
        self.operation_started.emit(operation)
        self._set_loading(True)

    def _emit_completed(self, operation: str, success: bool):
        self.operation_completed.emit(operation, success)
        self._set_loading(False)

    def _emit_error(self, operation: str, error: str):
        self._last_error = error
        logger.error(f"{self.__class__.__name__}.{operation}: {error}")
        self.operation_error.emit(operation, error)
        self._set_loading(False)

    def execute_with_error_handling(self, operation: str, func: Callable, *args, **kwargs) -> OperationResult:
        """
        Run ``func`` and wrap its outcome.

        Only API and network failures are turned into a failed result;
        anything else is a bug and propagates. Loading is reset either way.
        """
        self._emit_started(operation)
        try:
            result = func(*args, **kwargs)
        except TRANSIENT_ERRORS as e:
            message = map_exception(e, context=operation)
            self._emit_error(operation, message)
            return OperationResult.fail(message=message)
        finally:
            self._set_loading(False)
        self._emit_completed(operation, True)
        return OperationResult.ok(data=result)
