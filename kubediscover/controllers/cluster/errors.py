"""Exceptions raised by the cluster collector."""


class KubectlError(RuntimeError):
    """kubectl exited with a non-zero status."""

    def __init__(self, args: tuple[str, ...], stderr: str, returncode: int | None = None) -> None:
        self.command_args = args
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(stderr or "kubectl command failed")


class NamespaceNotFoundError(Exception):
    """The namespace requested as report scope does not exist on the cluster."""

    def __init__(self, namespace: str, detail: str | None = None) -> None:
        self.namespace = namespace
        self.detail = detail
        super().__init__(f"Namespace '{namespace}' does not exist")
