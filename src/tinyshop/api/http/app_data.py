from dataclasses import dataclass

from tinyshop.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
