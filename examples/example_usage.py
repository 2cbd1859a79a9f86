"""Example: drive the service layer directly, without Flask.

Controllers stay thin; the rules live in the services wired by the container.
"""

import importlib

from dotenv import load_dotenv

from punctuality_rewards.config import get_settings_module
from punctuality_rewards.container import build_container
from punctuality_rewards.core.enums import Role


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)

    result = container.stats_service.fetch_user_stats(1, 1, Role.EMPLOYEE)
    if result.ok:
        print(result.value.to_dict())
    else:
        print(result.to_dict())


if __name__ == "__main__":
    main()
