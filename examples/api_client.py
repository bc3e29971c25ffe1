"""
Example client for the QueryMapper inspection API.

Start the server first:
    $ python -m querymapper.server --port 8000
"""

from typing import Any, Dict

import requests


class QueryMapperClient:
    """
    Python client for the QueryMapper REST API.

    Example:
        >>> client = QueryMapperClient("http://localhost:8000")
        >>> client.parse("age-min=18&sort=name")["where"]
        [{'key': 'age', 'operator': '>=', 'value': '18'}]
    """

    def __init__(self, base_url: str = "http://localhost:8000"):
        self.base_url = base_url.rstrip("/")
        self.api_prefix = "/api/v1"

    def _url(self, path: str) -> str:
        return f"{self.base_url}{self.api_prefix}{path}"

    def health(self) -> Dict[str, Any]:
        response = requests.get(self._url("/health"))
        response.raise_for_status()
        return response.json()

    def parse(self, query: str) -> Dict[str, Any]:
        """Send a query string and return the parsed filters."""
        response = requests.get(f"{self._url('/filters')}?{query}")
        response.raise_for_status()
        return response.json()

    def condition(self, key: str, query: str) -> Dict[str, Any]:
        """Return the condition parsed for one key."""
        response = requests.get(f"{self._url('/filters/' + key)}?{query}")
        response.raise_for_status()
        return response.json()


def main():
    client = QueryMapperClient()
    print(client.health())

    parsed = client.parse("age-min=18&name-lk=John%20Doe&status=null&sort=name")
    for condition in parsed["where"]:
        print(condition)

    print(client.condition("sort", "age-min=18&sort=name"))


if __name__ == "__main__":
    main()
