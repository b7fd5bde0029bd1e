'''Serialization of counting configuration to JSON-ready dictionaries.

Evaluators are configured by their constructor parameters. The
:func:`simple_serialization` decorator gives them a ``to_dict()`` method
that stores the class name and those parameters; :func:`from_dict` rebuilds
the evaluator from the stored dictionary, so counting setups can be kept in
JSON files.
'''

import sys
import inspect
import importlib
from fractions import Fraction
from decimal import Decimal
from typing import Any, List, Dict, Callable


ZERO_PARAMS: List[str] = ['args', 'kwargs']

PACKAGE_NAME = __name__.split('.')[0]


def simple_serialization(class_: type) -> type:
    '''A decorator to provide a simple to_dict() serialization method.

    The resulting method will serialize all object attributes corresponding
    to the class's constructor parameter names. Therefore, this decorator
    is only useful when the class stores all its original parameters
    unchanged (or in any other form acceptable to its constructor).

    :param class_: The class to add the method to.
    '''
    if hasattr(class_, 'serialize_params'):
        param_names = class_.serialize_params
    else:
        param_names = list(inspect.signature(
            class_.__init__
        ).parameters.keys())
        if 'self' in param_names:
            param_names.remove('self')
        if param_names == ZERO_PARAMS and class_.__init__ == object.__init__:
            param_names = []

    def to_dict(self) -> Dict[str, Any]:
        out_dict = {'class': scoped_class_name(self)}
        for attr in param_names:
            out_dict[attr] = serialize_value(getattr(self, attr))
        return out_dict

    class_.to_dict = to_dict
    return class_


def serialize_value(value: Any) -> Any:
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    elif isinstance(value, tuple(ATOMIC_TYPES)):
        return value
    elif type(value) in CONVERTIBLE_TYPES:
        return CONVERTIBLE_TYPES[type(value)](value)
    elif isinstance(value, (list, tuple)):
        return [serialize_value(val) for val in value]
    elif isinstance(value, dict):
        return {str(key): serialize_value(val) for key, val in value.items()}
    else:
        raise ValueError(f'cannot serialize {value!r} to dict format')


def deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        if 'type' in value and value['type'] in TYPED_CONSTRUCTORS:
            return TYPED_CONSTRUCTORS[value['type']](value)
        elif 'class' in value and is_scoped_identifier(value['class']):
            return deserialize_class(value)
        else:
            return {key: deserialize_value(val) for key, val in value.items()}
    elif isinstance(value, tuple(ATOMIC_TYPES)):
        return value
    elif isinstance(value, list):
        return [deserialize_value(val) for val in value]
    else:
        raise ValueError(f'cannot deserialize {value!r}, type unknown')


def deserialize_class(clsdef: Dict[str, Any]) -> Any:
    cls = get_object(clsdef['class'])
    params = {
        key: deserialize_value(val)
        for key, val in clsdef.items() if key != 'class'
    }
    try:
        return cls(**params)
    except TypeError as err:
        raise ValueError(f'invalid parameters for {clsdef["class"]}: {err}')


def get_object(identifier: str) -> Any:
    '''Import the object referenced by its scoped name.

    Only objects from this package can be referenced, so that a
    configuration file cannot instantiate arbitrary classes.
    '''
    module, name = identifier.rsplit('.', 1)
    if module.split('.')[0] != PACKAGE_NAME:
        raise ValueError(f'refusing to load {identifier}: not a'
                         f' {PACKAGE_NAME} object')
    if module not in sys.modules:
        try:
            importlib.import_module(module)
        except ImportError:
            raise ValueError(f'unknown module in {identifier}')
    try:
        return getattr(sys.modules[module], name)
    except AttributeError:
        raise ValueError(f'unknown object {identifier}')


def from_dict(value: Dict[str, Any]) -> Any:
    """Parse a counting evaluator object from a JSON-like dictionary.

    :param value: A dictionary created by :func:`to_dict`.
    :raises ValueError: If the dictionary does not describe a valid
        evaluator.
    """
    if not isinstance(value, dict):
        raise ValueError('invalid ballotcount object def: dict expected,'
                         f' got {value!r}')
    elif 'class' not in value:
        raise ValueError('invalid ballotcount object def: must have'
                         ' a class key')
    elif not is_scoped_identifier(value['class']):
        inval_cls = value['class']
        raise ValueError(f'invalid ballotcount class def: {inval_cls}')
    else:
        return deserialize_value(value)


def to_dict(obj: Any) -> Dict[str, Any]:
    """Serialize a counting evaluator object to a JSON-ready dictionary.

    :param obj: An evaluator object. It should provide a `to_dict()` method
        (all the evaluators from Ballotcount have it, courtesy of the
        simple_serialization decorator).
    """
    if not hasattr(obj, 'to_dict'):
        raise ValueError(f'cannot serialize {obj!r}: no to_dict() method')
    return obj.to_dict()


def is_scoped_identifier(value: Any) -> bool:
    return (
        isinstance(value, str)
        and '.' in value
        and not value.startswith('.')
        and all(chunk.isidentifier() for chunk in value.split('.'))
    )


def scoped_class_name(value: Any) -> str:
    cls = value.__class__
    return '.'.join((cls.__module__, cls.__name__))


def fraction_to_json(f: Fraction) -> Dict[str, Any]:
    return {'type': 'Fraction', 'arguments': [f.numerator, f.denominator]}


def decimal_to_json(d: Decimal) -> Dict[str, Any]:
    return {'type': 'Decimal', 'value': str(d)}


ATOMIC_TYPES: List[type] = [
    str, int, float, bool, type(None),
]

CONVERTIBLE_TYPES: Dict[type, Callable] = {
    Fraction: fraction_to_json,
    Decimal: decimal_to_json,
}

TYPED_CONSTRUCTORS: Dict[str, Callable] = {
    'Fraction': lambda typedef: Fraction(*typedef['arguments']),
    'Decimal': lambda typedef: Decimal(typedef['value']),
}
