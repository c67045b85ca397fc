from __future__ import annotations


class PageLifecycle:
    """Activation token shared by a page and its workflows.

    Work started under one activation captures ``token()``; once the page is
    torn down (or torn down and reactivated) that token is no longer current
    and late results must be dropped.
    """

    def __init__(self, *, active: bool = True):
        self._generation = 0
        self._active = active

    @property
    def active(self) -> bool:
        return self._active

    def token(self) -> int:
        return self._generation

    def is_current(self, token: int) -> bool:
        return self._active and token == self._generation

    def start(self) -> None:
        self._active = True

    def stop(self) -> None:
        self._active = False
        self._generation += 1
