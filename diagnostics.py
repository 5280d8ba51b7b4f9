from __future__ import annotations

UNSUPPORTED_FEATURE = "unsupported-feature"
MALFORMED_ATTRIBUTE = "malformed-attribute"
DEPTH_LIMIT = "depth-limit"


class Diagnostic:
    def __init__(self, kind: str, message: str, tag: str = None, node_id: str = None):
        self.kind = kind
        self.message = message
        self.tag = tag
        self.node_id = node_id

    def is_error(self) -> bool:
        return self.kind != UNSUPPORTED_FEATURE

    def __repr__(self) -> str:
        return f"Diagnostic({self.kind!r}, {self.message!r})"

    def __str__(self) -> str:
        where = ""
        if self.tag:
            where = f"<{self.tag}"
            if self.node_id:
                where += f" id={self.node_id}"
            where += "> "
        return f"{where}{self.message}"


class DiagnosticLog:
    def __init__(self):
        self.events: list[Diagnostic] = []

    def unsupported(self, message: str, tag: str = None, node_id: str = None):
        self.events.append(Diagnostic(UNSUPPORTED_FEATURE, message, tag, node_id))

    def malformed(self, message: str, tag: str = None, node_id: str = None):
        self.events.append(Diagnostic(MALFORMED_ATTRIBUTE, message, tag, node_id))

    def add(self, kind: str, message: str, tag: str = None, node_id: str = None):
        self.events.append(Diagnostic(kind, message, tag, node_id))

    def errors(self) -> list[Diagnostic]:
        return [d for d in self.events if d.is_error()]

    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.events if not d.is_error()]

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self):
        return iter(self.events)

    def print_report(self):
        if len(self.events) == 0:
            print("SVG conversion: [OK] No diagnostics")
            return

        errors = self.errors()
        warnings = self.warnings()

        if errors:
            print("SVG conversion: [ERROR] Skipped elements:")
            for error in errors:
                print(f"  ERROR: {error}")

        if warnings:
            print("SVG conversion: [WARNING] Unsupported features:")
            for warning in warnings:
                print(f"  WARNING: {warning}")
