"""
Клиент прямого подключения к AI провайдерам для приложения-викторины.
"""
__version__ = "0.1.0"
