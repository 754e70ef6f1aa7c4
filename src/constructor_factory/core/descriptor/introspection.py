# src/constructor_factory/core/descriptor/introspection.py
"""
Introspecção estrutural de classes Python em TypeDescriptors.

Este módulo implementa a capacidade de *Type Introspection* usando a
reflexão nativa do Python (`inspect.signature` + `typing.get_type_hints`).

Regras de descoberta:
    - Candidatos a construtor:
        * `cls.__init__` (sempre presente; `object.__init__` vira aridade 0)
        * todo classmethod declarado na própria classe e marcado com
          `@constructor`, na ordem de declaração
    - Propriedades:
        * atributos anotados no nível da classe (graváveis), exceto ClassVar
        * objetos `property` (graváveis apenas quando possuem setter)
        * nomes iniciados por "_" são ignorados

Nulabilidade:
    - Um parâmetro é nullable somente quando o tipo declarado é
      `Optional[T]` / `T | None`. Valores default não alteram a regra.

Limites explícitos:
    - Não faz cache (ver `DescriptorRegistry`)
    - Não aceita parâmetros variádicos (*args/**kwargs)
    - Atributos de instância sem anotação na classe não são descobertos
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, ClassVar, Dict, List, get_origin, get_type_hints

from ..exceptions import DescriptorError
from .types import ConstructorCandidate, Parameter, Property, TypeDescriptor, unwrap_optional


CONSTRUCTOR_MARKER = "__constructor_candidate__"


def constructor(func: Any) -> classmethod:
    """Marca uma função (ou classmethod) como construtor candidato.

    Uso:
        class Item:
            @constructor
            def with_precision(cls, id: int, precision: int) -> "Item": ...
    """
    raw = func.__func__ if isinstance(func, classmethod) else func
    setattr(raw, CONSTRUCTOR_MARKER, True)
    return func if isinstance(func, classmethod) else classmethod(raw)


def _type_hints(obj: Any, owner: type) -> Dict[str, Any]:
    try:
        return get_type_hints(obj)
    except Exception as e:  # noqa: BLE001
        raise DescriptorError(
            message=f"Cannot resolve type hints of {owner.__qualname__}",
            details={"type": owner.__qualname__, "member": getattr(obj, "__name__", None), "error": str(e)},
            hint="Garanta que todas as anotações referenciam nomes importáveis no módulo.",
        ) from e


def _parameters(func: Callable[..., Any], hints: Dict[str, Any], owner: type, label: str) -> List[Parameter]:
    sig = inspect.signature(func)
    out: List[Parameter] = []
    for p in sig.parameters.values():
        if p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD):
            raise DescriptorError(
                message=f"Variadic parameters are not supported: {owner.__qualname__}.{label}",
                details={"type": owner.__qualname__, "constructor": label, "parameter": p.name},
            )
        if p.kind is p.KEYWORD_ONLY:
            if p.default is p.empty:
                raise DescriptorError(
                    message=f"Keyword-only parameter without default: {owner.__qualname__}.{label}",
                    details={"type": owner.__qualname__, "constructor": label, "parameter": p.name},
                )
            # não participa da invocação posicional
            continue

        declared = hints.get(p.name, Any)
        nullable, _ = unwrap_optional(declared)
        out.append(Parameter(name=p.name, declared_type=declared, is_nullable=nullable))
    return out


def _init_candidate(cls: type) -> ConstructorCandidate:
    init = cls.__init__
    if init is object.__init__:
        return ConstructorCandidate(name="__init__", parameters=(), factory=cls)

    hints = _type_hints(init, cls)
    params = _parameters(init, hints, cls, "__init__")
    # descarta `self`
    return ConstructorCandidate(name="__init__", parameters=tuple(params[1:]), factory=cls)


def _marked_candidates(cls: type) -> List[ConstructorCandidate]:
    out: List[ConstructorCandidate] = []
    for name, member in vars(cls).items():
        if not isinstance(member, classmethod):
            continue
        if not getattr(member.__func__, CONSTRUCTOR_MARKER, False):
            continue
        bound = getattr(cls, name)
        hints = _type_hints(member.__func__, cls)
        params = _parameters(bound, hints, cls, name)
        out.append(ConstructorCandidate(name=name, parameters=tuple(params), factory=bound))
    return out


def _properties(cls: type) -> List[Property]:
    found: Dict[str, Property] = {}

    for name, hint in _type_hints(cls, cls).items():
        if name.startswith("_") or get_origin(hint) is ClassVar:
            continue
        found[name] = Property.of(name, hint, settable=True)

    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, member in vars(klass).items():
            if name.startswith("_") or not isinstance(member, property):
                continue
            declared = Any
            if member.fget is not None:
                declared = _type_hints(member.fget, cls).get("return", Any)
            found[name] = Property.of(name, declared, settable=member.fset is not None)

    return list(found.values())


def describe_type(cls: type) -> TypeDescriptor:
    """Constrói o TypeDescriptor de `cls` a partir da reflexão nativa."""
    if not isinstance(cls, type):
        raise DescriptorError(
            message="Only classes can be described",
            details={"received": type(cls).__name__},
        )

    candidates = [_init_candidate(cls), *_marked_candidates(cls)]
    return TypeDescriptor.of(cls, candidates, _properties(cls))
