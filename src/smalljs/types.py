from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, TextIO, Union
from typing_extensions import Protocol, TypeAlias

from .config import InterpreterConfig
from .tree import FunctionDefinition

# ---------- Value Model ----------

@dataclass(frozen=True)
class JsUndefined:
    def __repr__(self) -> str:
        return "undefined"

UNDEFINED = JsUndefined()

class Invoker(Protocol):
    def __call__(self, function: 'JsObject', receiver: 'JsValue', args: List['JsValue']) -> 'JsValue': ...

class JsObject:
    """Property store with an optional parent used as a read fallback.

    Plain objects, environments and functions all share this shape; the
    parent is the prototype for objects and the enclosing scope for
    environments, and an ``invoker`` makes the object callable.
    """

    def __init__(self, name: str, proto: Optional['JsObject']=None, invoker: Optional[Invoker]=None):
        self.name = name
        self.proto = proto
        self.invoker = invoker
        self.values: Dict[str, JsValue] = {}

    def register(self, key: str, value: 'JsValue') -> None:
        self.values[key] = value

    def lookup(self, key: str) -> 'JsValue':
        obj: Optional[JsObject] = self

        while obj is not None:
            if key in obj.values:
                return obj.values[key]
            obj = obj.proto

        return UNDEFINED

    def is_callable(self) -> bool:
        return self.invoker is not None

    def invoke(self, receiver: 'JsValue', args: List['JsValue']) -> 'JsValue':
        if self.invoker is None:
            raise SmallJsTypeError(f"{self.name} is not a function")

        return self.invoker(self, receiver, args)

    def __repr__(self) -> str:
        from .eval.common import stringify  # local import to avoid cycle
        return stringify(self)

def new_env(parent: Optional[JsObject]) -> JsObject:
    return JsObject("env", proto=parent)

def new_object(proto: Optional[JsObject]) -> JsObject:
    return JsObject("object", proto=proto)

def new_function(name: str, invoker: Invoker) -> JsObject:
    return JsObject(name, invoker=invoker)

JsValue: TypeAlias = Union[int, str, JsUndefined, JsObject]

def is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

# ---------- Invocables ----------

@dataclass
class Host:
    """What natives may reach: the output sink and the active config."""
    out: TextIO
    config: InterpreterConfig

NativeFn = Callable[[Host, List[JsValue]], JsValue]

@dataclass(frozen=True)
class NativeFunction:
    name: str
    fn: NativeFn
    host: Host
    arity: Optional[int] = None  # None for variadic

    def __call__(self, function: JsObject, receiver: JsValue, args: List[JsValue]) -> JsValue:
        if self.arity is not None and len(args) != self.arity:
            raise SmallJsArityError(f"{self.name} expects {self.arity} args; got {len(args)}")

        return self.fn(self.host, args)

@dataclass(frozen=True)
class Closure:
    definition: FunctionDefinition
    env: JsObject  # captured defining scope, shared with the frame that created it

    def __call__(self, function: JsObject, receiver: JsValue, args: List[JsValue]) -> JsValue:
        from .runtime import call_closure  # local import to avoid cycle
        return call_closure(self, function, receiver, args)

# ---------- Exceptions ----------

class SmallJsFailure(Exception):
    line: Optional[int]

    def __init__(self, message: str, line: Optional[int]=None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message

        return f"{self.message} (line {self.line})"

class SmallJsTypeError(SmallJsFailure):
    pass

class SmallJsNameError(SmallJsFailure):
    def __init__(self, name: str):
        super().__init__(f"No variable {name} defined")
        self.name = name

class SmallJsRedeclarationError(SmallJsFailure):
    def __init__(self, name: str):
        super().__init__(f"Variable {name} already defined")
        self.name = name

class SmallJsArityError(SmallJsFailure):
    pass

class SmallJsBuiltinError(SmallJsFailure):
    pass

class SmallJsParseError(SmallJsFailure):
    def __init__(self, message: str, line: Optional[int]=None, column: Optional[int]=None):
        super().__init__(message, line)
        self.column = column

    def __str__(self) -> str:
        if self.line is not None and self.column is not None:
            return f"{self.message} (line {self.line}, col {self.column})"

        return super().__str__()

class SmallJsReturnSignal(Exception):
    """Internal control-flow exception used to implement `return`."""
    def __init__(self, value: JsValue):
        super().__init__()
        self.value = value
