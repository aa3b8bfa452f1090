from dataclasses import dataclass
from typing import Mapping

from dotenv_reflect import ReflectiveDotenv, register_coercion


@dataclass
class Endpoint:
    host: str
    port: int


def parse_endpoint(raw: str, values: Mapping[str, str]) -> Endpoint:
    host, _, port = raw.partition(":")
    return Endpoint(host, int(port or values.get("DEFAULT_PORT", "80")))


class Services:
    database: Endpoint = Endpoint("localhost", 5432)
    cache: Endpoint = Endpoint("localhost", 6379)


if __name__ == "__main__":
    register_coercion(Endpoint, parse_endpoint)
    env = ReflectiveDotenv.from_lines(["DEFAULT_PORT=8000", "database=db.internal:5433", "cache=redis"])
    env.bind(Services)
    print(Services.database, Services.cache)
