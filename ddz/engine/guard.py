"""校验守卫 - 标记一个值已经通过不变量检查

Guard 只暴露只读访问和 into_inner()，不提供任何修改途径，
外部代码因此无法伪造或篡改已经校验过的 Play / Composition。
"""

from typing import Any, Generic, TypeVar

T = TypeVar("T")

_SEAL = object()


def _unwrap(value: Any) -> Any:
    return value._value if isinstance(value, Guard) else value


class Guard(Generic[T]):
    """已校验值的只读包装。

    - 直接调用 Guard(value) 会抛 TypeError，只能经由本库的校验路径产生
    - Guard.new_unchecked(value) 跳过校验，调用方自行保证不变量成立
    - 属性读取委托给被包装的值，例如 guard.kind / guard.solos
    """

    __slots__ = ("_value",)

    def __init__(self, value: T, _seal: object = None):
        if _seal is not _SEAL:
            raise TypeError(
                "Guard 只能由校验过的构造路径产生；"
                "确认不变量成立时请使用 Guard.new_unchecked()"
            )
        object.__setattr__(self, "_value", value)

    @classmethod
    def new_unchecked(cls, value: T) -> "Guard[T]":
        """不做任何校验直接包装。

        调用方必须保证 value 满足该类型的全部不变量，
        并且之后不会有人修改它。
        """
        return cls(value, _SEAL)

    @property
    def value(self) -> T:
        return self._value

    def into_inner(self) -> T:
        """取出被包装的值，之后该值不再受守卫保护"""
        return self._value

    def __getattr__(self, name: str) -> Any:
        # 仅在常规查找失败时调用；_value 尚未设置时不能递归
        if name == "_value":
            raise AttributeError(name)
        return getattr(self._value, name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Guard 是只读的")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Guard 是只读的")

    def __reduce__(self):
        return (Guard.new_unchecked, (self._value,))

    def __eq__(self, other: object) -> bool:
        return self._value == _unwrap(other)

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: Any) -> bool:
        return self._value < _unwrap(other)

    def __le__(self, other: Any) -> bool:
        return self._value <= _unwrap(other)

    def __gt__(self, other: Any) -> bool:
        return self._value > _unwrap(other)

    def __ge__(self, other: Any) -> bool:
        return self._value >= _unwrap(other)

    # ============================================================
    #  运算（只对 Guard[Play] 生效，None 继续向后传递）
    # ============================================================

    def _holds_play(self) -> bool:
        from .hand_type import Play
        return isinstance(self._value, Play)

    def __add__(self, other: Any) -> Any:
        if not self._holds_play():
            return NotImplemented
        from .arithmetic import add
        return add(self, other)

    def __radd__(self, other: Any) -> Any:
        if not self._holds_play():
            return NotImplemented
        from .arithmetic import add
        return add(other, self)

    def __sub__(self, other: Any) -> Any:
        if not self._holds_play():
            return NotImplemented
        from .arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other: Any) -> Any:
        if not self._holds_play():
            return NotImplemented
        from .arithmetic import sub
        return sub(other, self)

    def __repr__(self) -> str:
        return f"Guard({self._value!r})"
