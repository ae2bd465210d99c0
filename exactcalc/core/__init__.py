"""
Core: числовая башня, математические примитивы и контракты.

Не зависит от builtin-слоя; конфигурация читается из exactcalc.config.
"""
