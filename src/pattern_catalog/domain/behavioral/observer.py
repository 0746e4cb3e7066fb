"""Observer: subscribers get notified about events on the subject they watch."""

from typing import Protocol

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace


class Observer(Protocol):
    def update(self, message: str) -> None: ...


class Subject:
    """Publisher: keeps an ordered list of observer references (non-owning)."""

    def __init__(self, trace: Trace) -> None:
        self._trace = trace
        self._observers: list[Observer] = []
        self._message = ""
        self._issued = 0

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def next_number(self) -> int:
        """Hand out the sequence number of the next subscriber."""
        self._issued += 1
        return self._issued

    def attach(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Remove ``observer``. Detaching an absent observer is a no-op."""
        if observer in self._observers:
            self._observers.remove(observer)

    def how_many_observers(self) -> None:
        self._trace.emit(f"There are {len(self._observers)} observers in the list.")

    def notify(self) -> None:
        self.how_many_observers()
        # Observers detached mid-pass still receive this notification.
        for observer in list(self._observers):
            observer.update(self._message)

    def create_message(self, message: str = "Empty") -> None:
        self._message = message
        self.notify()

    def some_business_logic(self) -> None:
        self._message = "change message"
        self.notify()
        self._trace.emit("I'm about to do something important")

    def dispose(self) -> None:
        self._observers.clear()
        self._trace.emit("Goodbye, I was the Subject.")


class NumberedObserver(Observer):
    """Subscriber that attaches itself on creation and remembers the last message."""

    def __init__(self, subject: Subject, trace: Trace) -> None:
        self._subject = subject
        self._trace = trace
        self._message_from_subject = ""
        self.number = subject.next_number()
        subject.attach(self)
        self._trace.emit(f'Hi, I\'m the Observer "{self.number}".')

    @property
    def last_message(self) -> str:
        return self._message_from_subject

    def update(self, message: str) -> None:
        self._message_from_subject = message
        self.print_info()

    def print_info(self) -> None:
        self._trace.emit(
            f'Observer "{self.number}": a new message is available --> {self._message_from_subject}')

    def remove_me_from_the_list(self) -> None:
        self._subject.detach(self)
        self._trace.emit(f'Observer "{self.number}" removed from the list.')

    def dispose(self) -> None:
        self._trace.emit(f'Goodbye, I was the Observer "{self.number}".')


class ObserverExample(PatternExample):
    key = "observer"
    name = "Observer"
    category = PatternCategory.BEHAVIORAL
    summary = "Define a subscription mechanism that notifies many objects about events."

    def demonstrate(self, trace: Trace) -> None:
        subject = Subject(trace)
        observer1 = NumberedObserver(subject, trace)
        observer2 = NumberedObserver(subject, trace)
        observer3 = NumberedObserver(subject, trace)

        subject.create_message("Hello World! :D")
        observer3.remove_me_from_the_list()

        subject.create_message("The weather is hot today! :p")
        observer4 = NumberedObserver(subject, trace)

        observer2.remove_me_from_the_list()
        observer5 = NumberedObserver(subject, trace)

        subject.create_message("My new car is great! ;)")
        observer5.remove_me_from_the_list()

        observer4.remove_me_from_the_list()
        observer1.remove_me_from_the_list()

        for observer in (observer5, observer4, observer3, observer2, observer1):
            observer.dispose()
        subject.dispose()
