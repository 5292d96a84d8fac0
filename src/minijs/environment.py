"""Lexical scopes for the minijs evaluator."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .values import Value, from_python


#one scope in the chain; closures keep a reference to the scope they saw
@dataclass(eq=False, slots=True)
class Environment:
    bindings: Dict[str, Value] = field(default_factory=dict)
    parent: Optional[Environment] = None

    @classmethod
    def from_bindings(cls, bindings: Mapping[str, object]) -> Environment:
        return cls(bindings={name: from_python(value) for name, value in bindings.items()})

    #nearest enclosing scope wins; None when no scope binds the name
    def get(self, name: str) -> Optional[Value]:
        env: Optional[Environment] = self
        while env is not None:
            value = env.bindings.get(name)
            if value is not None:
                return value
            env = env.parent
        return None

    #always writes the current scope, which is how shadowing works
    def set(self, name: str, value: Value) -> Value:
        self.bindings[name] = value
        return value

    def child(self) -> Environment:
        return Environment(parent=self)
