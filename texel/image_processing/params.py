# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Declarative parameter constraints via typing.Annotated.

Constraint markers (``Range``, ``Options``, ``Desc``) placed inside
``typing.Annotated`` hints on ``ImageProcessor`` subclasses declare which
attributes are tunable. ``collect_param_specs`` turns those hints into
``ParamSpec`` objects when the class is created; processors then validate
runtime overrides against them.

Usage
-----
::

    from typing import Annotated
    from texel.image_processing.params import Range, Options, Desc

    class MyFilter(ImageTransform):
        radius: Annotated[int, Range(min=1), Desc('Window radius')] = 1
        method: Annotated[str, Options('max', 'min'), Desc('Reduction')] = 'max'

Author
------
texel developers

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    Dict,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)

Number = Union[int, float]


class ParamMeta:
    """Marker base; only ``Annotated`` metadata of this type is collected."""

    __slots__ = ()


class Range(ParamMeta):
    """Inclusive numeric bounds. Either side may be left open."""

    __slots__ = ('min', 'max')

    def __init__(self, min: Optional[Number] = None,
                 max: Optional[Number] = None) -> None:
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        bounds = [f"{k}={v!r}" for k, v in (('min', self.min), ('max', self.max))
                  if v is not None]
        return f"Range({', '.join(bounds)})"


class Options(ParamMeta):
    """Closed set of allowed values."""

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options needs at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


@dataclass(frozen=True)
class ParamSpec:
    """One tunable processor parameter, built from its ``Annotated`` hint.

    Attributes
    ----------
    name : str
        Attribute and keyword-override name.
    param_type : type
        Declared type. ``float`` parameters also take ``int`` values.
    default : Any
        Class-level default.
    description : str
        Text from ``Desc``, or ``''``.
    min_value, max_value : int, float or None
        Bounds from ``Range``.
    choices : tuple or None
        Values from ``Options``.
    """

    name: str
    param_type: type
    default: Any
    description: str = ''
    min_value: Optional[Number] = None
    max_value: Optional[Number] = None
    choices: Optional[Tuple[Any, ...]] = None

    def _accepted_types(self) -> Tuple[type, ...]:
        if self.param_type is float:
            return (int, float)
        return (self.param_type,)

    def validate(self, value: Any) -> None:
        """Check *value* against the declared type, bounds and choices.

        Raises
        ------
        TypeError
            On a type mismatch. ``bool`` never passes as a number.
        ValueError
            On a bound or choice violation.
        """
        label = f"Parameter '{self.name}'"
        numeric = self.param_type in (int, float)
        if (numeric and isinstance(value, bool)) or not isinstance(
                value, self._accepted_types()):
            raise TypeError(
                f"{label} must be {self.param_type.__name__}, "
                f"got {type(value).__name__}"
            )
        if self.min_value is not None and value < self.min_value:
            raise ValueError(
                f"{label} value {value!r} is below minimum {self.min_value!r}")
        if self.max_value is not None and value > self.max_value:
            raise ValueError(
                f"{label} value {value!r} is above maximum {self.max_value!r}")
        if self.choices is not None and value not in self.choices:
            raise ValueError(
                f"{label} value {value!r} is not in allowed choices "
                f"{self.choices!r}")


def _declared_order(cls: type) -> Dict[str, None]:
    names: Dict[str, None] = {}
    for klass in reversed(cls.__mro__):
        names.update(dict.fromkeys(vars(klass).get('__annotations__', {})))
    return names


def _spec_from_hint(cls: type, name: str, hint: Any) -> Optional[ParamSpec]:
    if get_origin(hint) is not Annotated:
        return None
    by_kind = {type(m): m for m in hint.__metadata__ if isinstance(m, ParamMeta)}
    if not by_kind:
        return None
    bounds, options, desc = (by_kind.get(Range), by_kind.get(Options),
                             by_kind.get(Desc))
    if bounds is not None and options is not None:
        raise TypeError(
            f"{cls.__qualname__}.{name}: Range and Options are mutually "
            f"exclusive"
        )
    return ParamSpec(
        name=name,
        param_type=hint.__origin__,
        default=getattr(cls, name, None),
        description=desc.text if desc is not None else '',
        min_value=bounds.min if bounds is not None else None,
        max_value=bounds.max if bounds is not None else None,
        choices=options.choices if options is not None else None,
    )


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Build the ``ParamSpec`` tuple of *cls*, base-class fields first.

    Raises
    ------
    TypeError
        If one field declares both ``Range`` and ``Options``.
    """
    hints = get_type_hints(cls, include_extras=True)
    specs = (_spec_from_hint(cls, name, hints[name])
             for name in _declared_order(cls) if name in hints)
    return tuple(spec for spec in specs if spec is not None)
