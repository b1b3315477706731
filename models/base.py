# models/base.py
import re

from sqlalchemy.orm import DeclarativeBase, declared_attr

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")
_SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh")


def table_name_for(class_name: str) -> str:
     """
     Plural snake_case table name for a model class name.

     Property -> properties, MaintenanceRequest -> maintenance_requests,
     Survey -> surveys, Box -> boxes.
     """
     name = _CAMEL_BOUNDARY.sub("_", class_name).lower()
     if name.endswith("y") and name[-2:-1] not in ("a", "e", "i", "o", "u"):
          return name[:-1] + "ies"
     if name.endswith(_SIBILANT_ENDINGS):
          return name + "es"
     return name + "s"


class Base(DeclarativeBase):
     """Declarative base; every model gets its table name from its class name."""

     @declared_attr.directive
     def __tablename__(cls) -> str:
          return table_name_for(cls.__name__)
