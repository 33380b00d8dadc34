from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from arith.errors import UndefinedNameError


Scope = Dict[str, Any]


class Environment:
    """An ordered chain of scopes searched innermost first.

    Index 0 is the innermost scope. The chain itself is never modified in
    place: `push_call_scope` returns a new chain, so a caller can resume its
    own chain unchanged once the callee returns. Only the scopes it holds
    are mutable, through `define`.
    """
    def __init__(self, scopes: Optional[Sequence[Scope]] = None):
        if scopes is None:
            scopes = [{}]
        if not scopes:
            raise ValueError('an environment needs at least one scope')
        self.scopes: Tuple[Scope, ...] = tuple(scopes)

    @property
    def innermost(self) -> Scope:
        return self.scopes[0]

    @property
    def global_scope(self) -> Scope:
        return self.scopes[-1]

    @property
    def depth(self) -> int:
        return len(self.scopes)

    def lookup(self, name: str) -> Any:
        for scope in self.scopes:
            if name in scope:
                return scope[name]
        raise UndefinedNameError(name)

    def define(self, name: str, value: Any):
        self.innermost[name] = value

    def push_call_scope(self, bindings: Mapping[str, Any]) -> 'Environment':
        return Environment((dict(bindings),) + self.scopes)

    def __contains__(self, name: str) -> bool:
        return any(name in scope for scope in self.scopes)

    def __repr__(self) -> str:
        return f"<Environment depth={self.depth}>"
