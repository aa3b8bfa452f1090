# python
import logging
from typing import Final

from typing_extensions import Annotated

from dotenv_reflect import DoNotBind, EnvItem, Long, as_reflective


class Settings:
    host: Annotated[str, EnvItem(key="HOST", comment="Public hostname", value="localhost")] = "localhost"
    port: Annotated[int, EnvItem(key="PORT", value="8080")] = 8080
    request_id_seed: Long = 0
    debug: bool = False
    cache: Annotated[dict, DoNotBind] = {}
    VERSION: Final[str] = "1.0"


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    env = as_reflective(".env", fallback_to_env=True)
    print(env.generate(Settings))

    env.bind(Settings)
    print("Host:", Settings.host)
    print("Port:", Settings.port)
    print("Debug:", Settings.debug)
