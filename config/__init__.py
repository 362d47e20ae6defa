"""Настройки проекта Slipscan."""
