# -*- coding: utf-8 -*-
"""
Запуск сервиса: ``python -m src``.
"""

import uvicorn

from src.config.uvicorn_config import get_uvicorn_config

if __name__ == "__main__":
    uvicorn.run(**get_uvicorn_config())
