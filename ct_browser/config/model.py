from __future__ import annotations

from dataclasses import dataclass

DEFAULT_API_URL = "https://rickandmortyapi.com/api/character"


@dataclass
class GlobalConfig:
    ui_title: str = "Rick and Morty Character Table"
    subtitle: str = "Filter, sort and inspect every character"
    api_url: str = DEFAULT_API_URL
    request_timeout: float = 10.0
