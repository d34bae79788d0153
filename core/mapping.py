"""
Traductor entre DTOs (pydantic) y entidades ORM (SQLAlchemy).

Cada conversión se declara explícitamente como un binding dirigido
``origen -> destino``. Un binding de actualización puede declararse con
``skip_none=True``: los campos ``None`` del origen no se copian, de modo que
la entidad resultante solo lleva los atributos enviados (PATCH a nivel de objeto).
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Type, TypeVar
import logging

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect

from core.exceptions import MappingException

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _column_keys(model_class: type) -> set[str]:
    return {attr.key for attr in sa_inspect(model_class).column_attrs}


def _extract(obj: Any, skip_none: bool) -> dict[str, Any]:
    """Obtiene los valores del origen como diccionario."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(exclude_none=skip_none)
    data = {key: getattr(obj, key) for key in _column_keys(type(obj))}
    if skip_none:
        data = {k: v for k, v in data.items() if v is not None}
    return data


@dataclass(frozen=True)
class MapBinding:
    """Conversión declarada de ``source`` a ``target``."""
    source: type
    target: type
    skip_none: bool = False

    def apply(self, obj: Any) -> Any:
        if issubclass(self.target, BaseModel):
            return self.target.model_validate(obj, from_attributes=True)

        data = _extract(obj, skip_none=self.skip_none)
        columns = _column_keys(self.target)
        return self.target(**{k: v for k, v in data.items() if k in columns})


class Mapper:
    """
    Registro de bindings DTO <-> entidad.

    Uso:
        ```python
        mapper = Mapper()
        mapper.create_map(Person, PersonDto)
        mapper.create_map(PersonUpdateDto, Person, skip_none=True)
        dto = mapper.map(person, PersonDto)
        ```
    """

    def __init__(self):
        self._bindings: dict[tuple[type, type], MapBinding] = {}

    def create_map(self, source: type, target: type, skip_none: bool = False) -> "Mapper":
        """
        Declara una conversión dirigida.

        Args:
            source: Tipo de origen (DTO o entidad)
            target: Tipo de destino
            skip_none: Si True, los campos None del origen no se copian

        Returns:
            El mismo mapper, para encadenar declaraciones
        """
        self._bindings[(source, target)] = MapBinding(source, target, skip_none)
        return self

    def has_map(self, source: type, target: type) -> bool:
        try:
            self._find(source, target)
        except MappingException:
            return False
        return True

    def _find(self, source: type, target: type) -> MapBinding:
        # subclases de un DTO reutilizan el binding de su base
        for klass in source.__mro__:
            binding = self._bindings.get((klass, target))
            if binding is not None:
                return binding
        raise MappingException(source, target)

    def map(self, obj: Any, target: Type[T]) -> Optional[T]:
        """
        Convierte ``obj`` al tipo ``target``.

        La ausencia (None) se traduce a None.

        Raises:
            MappingException: Si no hay binding declarado
        """
        if obj is None:
            return None
        return self._find(type(obj), target).apply(obj)

    def map_many(self, items: Iterable[Any], target: Type[T]) -> List[T]:
        return [self.map(item, target) for item in items]
