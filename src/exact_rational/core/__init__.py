"""
Core модули exact-rational

Значимый тип Rational, целочисленные примитивы и контракты сериализации.
Не зависит от приложения, в котором используется.
"""
