"""Proxy: a stand-in that controls access to the real subject."""

from collections.abc import Callable
from typing import Optional, Protocol

from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.domain.trace import Trace

AccessPolicy = Callable[[], bool]


def grant_all() -> bool:
    return True


def deny_all() -> bool:
    return False


class Subject(Protocol):
    def request(self) -> None: ...


class RealSubject(Subject):
    def __init__(self, trace: Trace) -> None:
        self._trace = trace

    def request(self) -> None:
        self._trace.emit("RealSubject: Handling request.")


class Proxy(Subject):
    """
    Guards the real subject: checks access first, logs after.

    When the policy denies access, neither delegation nor logging happens.
    """

    def __init__(self, real_subject: RealSubject, trace: Trace,
                 access_policy: Optional[AccessPolicy] = None) -> None:
        self._real_subject = real_subject
        self._trace = trace
        self._access_policy = access_policy or grant_all

    def request(self) -> None:
        if self.check_access():
            self._real_subject.request()
            self.log_access()
        else:
            self._trace.emit("Proxy: Access denied, the real request was not fired.")

    def check_access(self) -> bool:
        self._trace.emit("Proxy: Checking access prior to firing a real request.")
        return self._access_policy()

    def log_access(self) -> None:
        self._trace.emit("Proxy: Logging the time of request.")


def client_code(subject: Subject) -> None:
    subject.request()


class ProxyExample(PatternExample):
    key = "proxy"
    name = "Proxy"
    category = PatternCategory.STRUCTURAL
    summary = "Provide a substitute that controls access to another object."

    def demonstrate(self, trace: Trace) -> None:
        trace.emit("Client: Executing the client code with a real subject:")
        real_subject = RealSubject(trace)
        client_code(real_subject)
        trace.emit()

        trace.emit("Client: Executing the same client code with a proxy:")
        client_code(Proxy(real_subject, trace))
        trace.emit()

        trace.emit("Client: Executing the same client code with a proxy that denies access:")
        client_code(Proxy(real_subject, trace, access_policy=deny_all))
