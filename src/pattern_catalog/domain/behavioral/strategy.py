"""Strategy: interchangeable algorithms behind one interface."""

from typing import Optional, Protocol

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Strategy(Protocol):
    def do_algorithm(self, data: str) -> str: ...


class ConcreteStrategyA(Strategy):
    """Normal sorting."""

    def do_algorithm(self, data: str) -> str:
        return "".join(sorted(data))


class ConcreteStrategyB(Strategy):
    """Reverse sorting."""

    def do_algorithm(self, data: str) -> str:
        return "".join(sorted(data, reverse=True))


class Context:
    """Holds zero or one replaceable strategy."""

    DATA: str = "aecbd"

    def __init__(self, trace: Trace, strategy: Optional[Strategy] = None) -> None:
        self._trace = trace
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[Strategy]:
        return self._strategy

    def set_strategy(self, strategy: Optional[Strategy]) -> None:
        self._strategy = strategy

    def do_some_business_logic(self) -> Optional[str]:
        """Run the current strategy over the sample data. Returns None when unset."""
        if self._strategy is None:
            self._trace.emit("Context: Strategy isn't set")
            return None
        self._trace.emit("Context: Sorting data using the strategy (not sure how it'll do it)")
        result = self._strategy.do_algorithm(self.DATA)
        self._trace.emit(result)
        return result


class StrategyExample(PatternExample):
    key = "strategy"
    name = "Strategy"
    category = PatternCategory.BEHAVIORAL
    summary = "Define a family of algorithms and make them interchangeable at runtime."

    def demonstrate(self, trace: Trace) -> None:
        context = Context(trace, ConcreteStrategyA())
        trace.emit("Client: Strategy is set to normal sorting.")
        context.do_some_business_logic()
        trace.emit()
        trace.emit("Client: Strategy is set to reverse sorting.")
        context.set_strategy(ConcreteStrategyB())
        context.do_some_business_logic()
