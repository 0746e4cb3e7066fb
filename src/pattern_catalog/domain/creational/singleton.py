"""Singleton: exactly one lazily created instance, reachable from anywhere."""

from collections.abc import Callable
from typing import Any, ClassVar, Generic, Optional, TypeVar

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace

T = TypeVar("T")


class Singleton:
    """
    Process-wide single instance, created on first access.

    Direct construction and copying are refused so the instance stays unique.
    """

    _instance: ClassVar[Optional["Singleton"]] = None
    _CREATION_KEY: ClassVar[object] = object()

    def __init__(self, _key: object = None) -> None:
        if _key is not Singleton._CREATION_KEY:
            raise TypeError("Singleton cannot be constructed directly; use Singleton.get_instance().")
        self.value = "singleton"

    @classmethod
    def get_instance(cls) -> "Singleton":
        """Get or create the single instance."""
        if cls._instance is None:
            cls._instance = cls(Singleton._CREATION_KEY)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the instance (primarily for testing)."""
        cls._instance = None

    def __copy__(self) -> "Singleton":
        raise TypeError("Singleton instances cannot be copied.")

    def __deepcopy__(self, memo: dict[int, Any]) -> "Singleton":
        raise TypeError("Singleton instances cannot be copied.")

    def some_business_logic(self) -> str:
        return f"Singleton: running business logic on instance {id(self):#x}."


class LazyInstance(Generic[T]):
    """
    Explicitly passed shared instance, created on first ``get()``.

    The alternative to a global: whoever owns the holder decides its scope,
    and every collaborator given the holder sees the same object.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._instance: Optional[T] = None
        self._created = False

    @property
    def created(self) -> bool:
        return self._created

    def get(self) -> T:
        if not self._created:
            self._instance = self._factory()
            self._created = True
        return self._instance  # type: ignore[return-value]


class SharedSettings:
    """Sample payload for LazyInstance."""

    def __init__(self) -> None:
        self.theme = "dark"


class SingletonExample(PatternExample):
    key = "singleton"
    name = "Singleton"
    category = PatternCategory.CREATIONAL
    summary = "Ensure a class has only one instance with a global access point."

    def demonstrate(self, trace: Trace) -> None:
        s1 = Singleton.get_instance()
        s2 = Singleton.get_instance()
        if s1 is s2:
            trace.emit("Singleton works, both variables contain the same instance.")
        else:
            trace.emit("Singleton failed, variables contain different instances.")
        try:
            Singleton()
        except TypeError:
            trace.emit("Client: Direct construction is refused.")
        trace.emit()

        holder: LazyInstance[SharedSettings] = LazyInstance(SharedSettings)
        trace.emit(f"LazyInstance: created before first access? {holder.created}")
        first = holder.get()
        trace.emit(f"LazyInstance: created after first access? {holder.created}")
        second = holder.get()
        trace.emit(f"LazyInstance: same instance on every access? {first is second}")
