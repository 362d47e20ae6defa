"""
Фабрика для создания компонентов домена Slipscan.

Предоставляет удобные методы для создания и конфигурации
всех компонентов через единый интерфейс.
"""

from loguru import logger

from config.settings import validate_config
from ..domain.exceptions import ScanConfigurationError
from ..domain.interfaces import IFieldExtractor, IValueStabilizer
from ..extraction.char_corrector import ConfusableCharCorrector
from ..extraction.field_extractor import FieldExtractor
from ..infrastructure.frame_file_reader import FrameFileReader
from ..session.scan_session import ScanSession
from ..tracking.stabilizer import TemporalStabilizer


class ScanComponentFactory:
    """
    Фабрика для создания компонентов домена Slipscan.

    Домен Slipscan отвечает за:
    - Извлечение полей квитанции из строк OCR
    - Стабилизацию значений по кадрам
    - Сеанс сканирования (отчёт о найденных полях)
    """

    @staticmethod
    def create_extractor() -> IFieldExtractor:
        """
        Создает экстрактор полей.

        Returns:
            Экстрактор, реализующий интерфейс IFieldExtractor
        """
        logger.debug("[Slipscan] Создание экстрактора полей")
        return FieldExtractor(corrector=ConfusableCharCorrector())

    @staticmethod
    def create_stabilizer() -> IValueStabilizer:
        """
        Создает стабилизатор. Один экземпляр на сеанс сканирования.

        Returns:
            Стабилизатор, реализующий интерфейс IValueStabilizer
        """
        logger.debug("[Slipscan] Создание стабилизатора")
        return TemporalStabilizer()

    @staticmethod
    def create_frame_reader() -> FrameFileReader:
        logger.debug("[Slipscan] Создание загрузчика записей кадров")
        return FrameFileReader()

    @staticmethod
    def create_session() -> ScanSession:
        """
        Создает сеанс сканирования с проверкой конфигурации.

        Raises:
            ScanConfigurationError: Если настройки некорректны
        """
        try:
            validate_config()
        except ValueError as e:
            raise ScanConfigurationError(
                message="Некорректная конфигурация",
                component="ScanComponentFactory",
                original_error=e,
            )

        logger.debug("[Slipscan] Создание сеанса сканирования")
        return ScanSession(
            extractor=ScanComponentFactory.create_extractor(),
            stabilizer=ScanComponentFactory.create_stabilizer(),
        )
