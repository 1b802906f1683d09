"""
Discriminant-to-record registry.

Tagged Horizon resources (operations, effects) carry a ``type`` field whose
value selects the concrete record shape. Each registry is a closed, enumerable
table mapping those values to pydantic models; decoding an unregistered value
fails instead of producing an untyped record.
"""

from typing import Any, Dict, Generic, Iterator, List, Type, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel

from ..errors import UnknownRecordTypeError

T = TypeVar("T", bound=BaseModel)

RawPayload = Union[bytes, str, Dict[str, Any]]


class RecordRegistry(Generic[T]):
    """Registration table mapping discriminant strings to record models."""

    def __init__(self, name: str, discriminant: str = "type"):
        """
        Args:
            name: Human readable family name used in error messages ("operation", "effect")
            discriminant: Payload field holding the tag
        """
        self.name = name
        self.discriminant = discriminant
        self._types: Dict[str, Type[T]] = {}

    def register(self, model: Type[T]) -> Type[T]:
        """Register a model under every value of its ``Literal`` discriminant.

        Usable as a class decorator.
        """
        field = model.model_fields.get(self.discriminant)
        if field is None or get_origin(field.annotation) is None:
            raise TypeError(
                f"{model.__name__} must declare {self.discriminant}: Literal[...] to be registered"
            )
        kinds = get_args(field.annotation)
        if not kinds:
            raise TypeError(f"{model.__name__}.{self.discriminant} declares no values")
        for kind in kinds:
            existing = self._types.get(kind)
            if existing is not None and existing is not model:
                raise ValueError(
                    f"{self.name} type {kind!r} already registered to {existing.__name__}"
                )
            self._types[kind] = model
        return model

    def model_for(self, kind: str) -> Type[T]:
        try:
            return self._types[kind]
        except KeyError:
            raise UnknownRecordTypeError(kind, self.name) from None

    def decode(self, kind: str, data: RawPayload) -> T:
        """Decode ``data`` into the model registered for ``kind``.

        Raises:
            UnknownRecordTypeError: ``kind`` is not registered
            pydantic.ValidationError: ``data`` does not fit the selected model
        """
        model = self.model_for(kind)
        if isinstance(data, (bytes, str)):
            return model.model_validate_json(data)
        return model.model_validate(data)

    @property
    def kinds(self) -> List[str]:
        return sorted(self._types)

    def __contains__(self, kind: object) -> bool:
        return kind in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self.kinds)

    def __len__(self) -> int:
        return len(self._types)
