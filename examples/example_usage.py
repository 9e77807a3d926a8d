"""Example: call the service layer directly, without Flask.

Controllers are a thin layer; the service and repository can be used on their own.
"""

import importlib

from employee_api.config import get_settings_module
from employee_api.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    for employee in container.employee_service.find_all():
        print(employee.to_json())


if __name__ == "__main__":
    main()
