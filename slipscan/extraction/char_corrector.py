from dataclasses import dataclass
from typing import Optional
from loguru import logger

from config.settings import MAX_CHAR_SUBSTITUTIONS


@dataclass
class CharCorrectionResult:
    text: Optional[str]     # None - символ не удалось привести к допустимому набору
    was_fixed: bool
    replacements: int

    @property
    def ok(self) -> bool:
        return self.text is not None


class ConfusableCharCorrector:
    """
    Заменяет визуально похожие символы, которые OCR путает.

    Примеры (в Menlo видно разницу): 1 и l, I и l, 0 и O, s и S.
    Символ, уже входящий в допустимый набор, не трогается.
    ЦКП: Строка только из допустимых символов или отказ.
    """

    # Цепочки замен: 's' -> 'S' -> '5', 'o' -> 'O' -> '0'
    MAP = {
        "s": "S", "S": "5", "5": "S",
        "o": "O", "Q": "O", "O": "0", "0": "O",
        "l": "I", "I": "1", "1": "I",
        "B": "8", "8": "B",
    }

    def __init__(self, max_substitutions: int = MAX_CHAR_SUBSTITUTIONS):
        self.max_substitutions = max_substitutions

    def correct_char(self, char: str, allowed_chars: str) -> str:
        """
        Возвращает похожий символ из allowed_chars, если он найден
        не более чем за max_substitutions замен. Иначе - последний
        достигнутый символ (вызывающий сам проверяет результат).
        """
        current = char
        substitutions = 0
        while current not in allowed_chars and substitutions < self.max_substitutions:
            alt = self.MAP.get(current)
            if alt is None:
                break
            current = alt
            substitutions += 1
        return current

    def correct(self, text: str, allowed_chars: str) -> CharCorrectionResult:
        """
        ЦКП: Исправленный текст или отказ целиком.

        Один неисправимый символ делает невалидной всю строку.
        """
        result = []
        replacements = 0

        for char in text:
            fixed = self.correct_char(char, allowed_chars)
            if fixed not in allowed_chars:
                logger.trace(f"[ConfusableCharCorrector] Неисправимый символ {char!r} в '{text}'")
                return CharCorrectionResult(text=None, was_fixed=False, replacements=replacements)
            if fixed != char:
                replacements += 1
            result.append(fixed)

        was_fixed = replacements > 0
        if was_fixed:
            logger.debug(f"[ConfusableCharCorrector] Исправлено {replacements} симв. в '{text}'")

        return CharCorrectionResult(
            text="".join(result),
            was_fixed=was_fixed,
            replacements=replacements,
        )
