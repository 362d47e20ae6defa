"""
Исключения для домена Slipscan.

Ядро (экстрактор и стабилизатор) исключений не бросает: "не найдено",
"не исправлено" и "ещё не стабильно" - это None. Исключения нужны
только на границе: загрузка записей кадров и конфигурация.
"""


class ScanError(Exception):
    """Базовое исключение для ошибок домена Slipscan."""

    def __init__(self, message: str, component: str = None, original_error: Exception = None):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Scan Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class ScanConfigurationError(ScanError):
    """Ошибка конфигурации домена Slipscan."""
    pass


class ScanFileSystemError(ScanError):
    """Ошибка файловой системы в домене Slipscan."""
    pass


class ScanFileNotFoundError(ScanFileSystemError):
    """Файл записи кадров не найден."""
    pass


class ScanDataFormatError(ScanError):
    """Ошибка формата данных (некорректная запись кадров)."""
    pass
