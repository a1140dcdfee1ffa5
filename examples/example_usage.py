"""Example: using the services without Flask.

Controllers are a thin layer; the rules live in the services and the hours engine.
"""

import importlib

from config import get_settings_module

from src.ponto_system.ponto_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    report = container.monthly_report_service.build_monthly_report(1, year=2026, month=1)
    print(report.summary())


if __name__ == "__main__":
    main()
