import importlib
import inspect
import logging
import threading
from typing import Any, Iterable, Tuple, Type

from sea.core.exceptions import BindingError
from sea.core.observer import Observer

logger = logging.getLogger(__name__)

# Observer classes are instantiated once and shared by every signal binding them;
# the instance lives on its class so it goes away with it
_INSTANCE_ATTR = "_sea_shared_instance"
_instances_lock = threading.Lock()


def import_string(dotted_path: str) -> Any:
    """Import ``package.module.Attribute`` and return the attribute."""
    try:
        module_path, attr_name = dotted_path.rsplit(".", 1)
    except ValueError as exc:
        raise ImportError(f"'{dotted_path}' is not a dotted path") from exc

    module = importlib.import_module(module_path)
    try:
        return getattr(module, attr_name)
    except AttributeError as exc:
        raise ImportError(
            f"Module '{module_path}' does not define '{attr_name}'"
        ) from exc


def bind_observers(signal_cls: Type, references: Iterable[Any]) -> Tuple[Observer, ...]:
    """Resolve observer references for a signal, failing on the first bad one."""
    observers = []
    for reference in references:
        observer = _resolve(signal_cls, reference)
        _check_handler(signal_cls, observer)
        observers.append(observer)
    return tuple(observers)


def _resolve(signal_cls: Type, reference: Any) -> Observer:
    target = reference
    if isinstance(reference, str):
        try:
            target = import_string(reference)
        except ImportError as exc:
            raise BindingError(
                f"{_name(signal_cls)}: observer '{reference}' could not be imported ({exc})"
            ) from exc

    if isinstance(target, Observer):
        return target

    if isinstance(target, type) and issubclass(target, Observer):
        return _instance_of(signal_cls, target)

    raise BindingError(
        f"{_name(signal_cls)}: {reference!r} does not implement the Observer contract"
    )


def _instance_of(signal_cls: Type, observer_cls: Type[Observer]) -> Observer:
    with _instances_lock:
        instance = observer_cls.__dict__.get(_INSTANCE_ATTR)
        if instance is None:
            if inspect.isabstract(observer_cls):
                raise BindingError(
                    f"{_name(signal_cls)}: observer {observer_cls.__qualname__} "
                    "does not implement handle()"
                )
            try:
                instance = observer_cls()
            except TypeError as exc:
                raise BindingError(
                    f"{_name(signal_cls)}: observer {observer_cls.__qualname__} "
                    f"cannot be instantiated without arguments ({exc})"
                ) from exc
            setattr(observer_cls, _INSTANCE_ATTR, instance)
            logger.debug("Instantiated observer %r", instance)
    return instance


def _check_handler(signal_cls: Type, observer: Observer) -> None:
    if not type(observer).accepts(signal_cls):
        raise BindingError(
            f"{_name(signal_cls)}: observer {observer!r} observes "
            f"{type(observer).observes!r}, not this signal"
        )

    handler = getattr(observer, "handle", None)
    if not callable(handler):
        raise BindingError(f"{_name(signal_cls)}: observer {observer!r} has no handle()")
    try:
        inspect.signature(handler).bind(object())
    except TypeError as exc:
        raise BindingError(
            f"{_name(signal_cls)}: {observer!r}.handle() must accept exactly the signal"
        ) from exc
    except ValueError:
        # Builtins without an introspectable signature are taken at face value
        pass


def _name(signal_cls: Type) -> str:
    return f"{signal_cls.__module__}.{signal_cls.__qualname__}"
