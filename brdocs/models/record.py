from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Iterable, Mapping

from pydantic import BaseModel, Field, ConfigDict, field_validator

from brdocs.utils.log import get_logger
from .exceptions import ReadOnlyViolation, SchemaViolation, TypeViolation, UnknownKeyError

log = get_logger(__name__)


class TypeTag(str, Enum):
    """Tipos primitivos aceitos num schema de registro."""
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    LIST = "list"          # list/tuple
    MAPPING = "mapping"    # dict e afins
    OBJECT = "object"      # qualquer outra coisa
    NULL = "null"


def type_tag(value: Any) -> TypeTag:
    if value is None:
        return TypeTag.NULL
    # bool antes de int: True não é inteiro aqui
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, int):
        return TypeTag.INTEGER
    if isinstance(value, float):
        return TypeTag.FLOAT
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, (list, tuple)):
        return TypeTag.LIST
    if isinstance(value, Mapping):
        return TypeTag.MAPPING
    return TypeTag.OBJECT


def _tags(value: Any) -> set[Any]:
    if isinstance(value, (str, TypeTag)):
        return {value}
    return set(value or ())


class RecordSchema(BaseModel):
    """
    Schema de um registro imutável.
    - `types`: chave -> conjunto não vazio de TypeTag aceitos. Vazio = sem schema.
    - `optional`: chaves que podem faltar ou vir como None.
    Aceita 'string', TypeTag.STRING ou coleções deles para cada chave.
    """
    model_config = ConfigDict(frozen=True)

    types: dict[str, frozenset[TypeTag]] = Field(default_factory=dict)
    optional: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("types", mode="before")
    @classmethod
    def _normalize_types(cls, v: Any):
        if v is None:
            return {}
        out = {}
        for key, accepted in dict(v).items():
            tags = _tags(accepted)
            if not tags:
                raise ValueError(f"'{key}' precisa aceitar ao menos um tipo")
            out[str(key)] = tags
        return out

    @field_validator("optional", mode="before")
    @classmethod
    def _normalize_optional(cls, v: Any):
        if v is None:
            return frozenset()
        if isinstance(v, str):
            return frozenset({v})
        return frozenset(str(k) for k in v)

    @property
    def enforced(self) -> bool:
        return bool(self.types)

    def expected(self, key: str) -> list[str]:
        """Tipos aceitos para `key`, na ordem de declaração de TypeTag."""
        accepted = self.types.get(key, frozenset())
        return [t.value for t in TypeTag if t in accepted]


class TypedImmutableRecord:
    """
    Registro chave/valor somente leitura, validado contra um schema na construção.

    A construção é tudo-ou-nada: qualquer violação levanta antes do objeto
    existir. Depois disso nenhum método altera o conteúdo. Os valores são
    guardados como vieram (cópia rasa do mapeamento), então registros podem
    conter outros registros ou objetos arbitrários.

    Subclasses podem declarar SCHEMA e OPTIONAL, usados quando `schema` e
    `optional` não são passados:

        class Endereco(TypedImmutableRecord):
            SCHEMA = {"rua": "string", "numero": ["string", "integer"]}
            OPTIONAL = ("complemento",)
    """

    SCHEMA: ClassVar[Mapping[str, Any]] = {}
    OPTIONAL: ClassVar[Iterable[str]] = ()

    __slots__ = ("_data", "_schema")

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        schema: RecordSchema | Mapping[str, Any] | None = None,
        optional: Iterable[str] | None = None,
    ) -> None:
        if isinstance(schema, RecordSchema):
            rs = schema if optional is None else schema.model_copy(
                update={"optional": RecordSchema(optional=optional).optional}
            )
        else:
            rs = RecordSchema(
                types=self.SCHEMA if schema is None else schema,
                optional=self.OPTIONAL if optional is None else optional,
            )
        values = self._validate(dict(data or {}), rs)
        object.__setattr__(self, "_schema", rs)
        object.__setattr__(self, "_data", MappingProxyType(dict(values)))

    def _validate(self, data: dict[str, Any], schema: RecordSchema) -> dict[str, Any]:
        if not schema.enforced:
            return data
        name = type(self).__name__

        unknown = [k for k in data if k not in schema.types]
        if unknown:
            log.debug("%s: chaves fora do schema %s", name, unknown)
            raise SchemaViolation(name, unknown)

        for key in schema.types:
            value = data.get(key)
            if value is None and key in schema.optional:
                continue
            tag = type_tag(value)
            if tag not in schema.types[key]:
                log.debug("%s: '%s' com tipo %s", name, key, tag.value)
                raise TypeViolation(name, key, schema.expected(key), tag.value)
            # chave ausente que aceita null fica registrada como None
            data.setdefault(key, None)
        return data

    # ---------------- Leitura ----------------

    @property
    def schema(self) -> RecordSchema:
        return self._schema

    def get(self, key: str) -> Any:
        """
        Valor armazenado em `key`.
        Chave opcional não fornecida retorna None; qualquer outra ausente
        levanta UnknownKeyError.
        """
        if key in self._data:
            return self._data[key]
        if key in self._schema.optional:
            return None
        raise UnknownKeyError(type(self).__name__, key)

    def dump(self) -> dict[str, Any]:
        """Cópia rasa de todos os dados, com as opcionais ausentes preenchidas com None."""
        out = dict(self._data)
        for key in sorted(self._schema.optional):
            out.setdefault(key, None)
        return out

    def keys(self) -> list[str]:
        return list(self.dump())

    def __contains__(self, key: object) -> bool:
        return key in self._data or key in self._schema.optional

    def __len__(self) -> int:
        return len(self.keys())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.dump() == other.dump()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.dump()!r})"

    # imutável: copiar devolve o próprio objeto
    def __copy__(self) -> "TypedImmutableRecord":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "TypedImmutableRecord":
        return self

    # ---------------- Escrita ----------------

    def set(self, key: str, value: Any) -> None:
        raise ReadOnlyViolation(type(self).__name__)

    def __setattr__(self, key: str, value: Any) -> None:
        raise ReadOnlyViolation(type(self).__name__)

    def __delattr__(self, key: str) -> None:
        raise ReadOnlyViolation(type(self).__name__)
