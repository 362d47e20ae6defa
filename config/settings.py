"""
Настройки проекта Slipscan.

Политика стабилизации зафиксирована здесь и не настраивается через конструкторы.
"""

from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
RECORDINGS_DIR = DATA_DIR / "recordings"
OUTPUT_DIR = DATA_DIR / "output"

# Форматы записей кадров для replay
SUPPORTED_RECORDING_FORMATS = [".json", ".yaml", ".yml"]

# =============================================================================
# НАСТРОЙКИ ИЗВЛЕЧЕНИЯ
# =============================================================================
# Максимум замен похожих символов на один символ ('s' -> 'S' -> '5')
MAX_CHAR_SUBSTITUTIONS = 2

# Строки левее этой границы (нормализованный X) игнорируются:
# текст обрезан краем квитанции
MIN_LINE_X = 0.06

# =============================================================================
# НАСТРОЙКИ СТАБИЛИЗАЦИИ
# =============================================================================
# Значение считается стабильным при count >= 9 (т.е. 10 наблюдений всего)
STABLE_MIN_COUNT = 9

# Через сколько кадров без подтверждения наблюдение забывается (~1с при 30 fps)
OBSERVATION_TTL_FRAMES = 30


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config():
    """Проверяет корректность конфигурации."""
    errors = []

    if MAX_CHAR_SUBSTITUTIONS < 0:
        errors.append(f"MAX_CHAR_SUBSTITUTIONS должен быть >= 0, получено: {MAX_CHAR_SUBSTITUTIONS}")

    if STABLE_MIN_COUNT < 0:
        errors.append(f"STABLE_MIN_COUNT должен быть >= 0, получено: {STABLE_MIN_COUNT}")

    if OBSERVATION_TTL_FRAMES <= 0:
        errors.append(f"OBSERVATION_TTL_FRAMES должен быть > 0, получено: {OBSERVATION_TTL_FRAMES}")

    if not 0.0 <= MIN_LINE_X < 1.0:
        errors.append(f"MIN_LINE_X должен быть в [0, 1), получено: {MIN_LINE_X}")

    if errors:
        raise ValueError("\n".join(errors))

    return True
