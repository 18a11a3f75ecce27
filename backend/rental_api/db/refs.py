# rental_api/db/refs.py
"""Primary-key type and weak-reference (foreign key) columns shared by all models."""
from __future__ import annotations

import enum

from sqlalchemy import BigInteger, Column, ForeignKey, Integer

# SQLite는 INTEGER PRIMARY KEY 에서만 자동 증가
IdType = BigInteger().with_variant(Integer(), "sqlite")


class RefPolicy(str, enum.Enum):
    """What the store does to a referencing row when its target row is deleted."""

    SET_NULL = "SET NULL"   # 참조만 끊김, 참조하는 행은 유지


def id_column() -> Column:
    return Column(IdType, primary_key=True, autoincrement=True)


def ref_column(target: str, policy: RefPolicy, **kwargs) -> Column:
    """FK column to ``<target>.id``; nullable so a weak reference may be absent."""
    return Column(
        BigInteger,
        ForeignKey(f"{target}.id", ondelete=policy.value),
        nullable=True,
        index=True,
        **kwargs,
    )


__all__ = ["IdType", "RefPolicy", "id_column", "ref_column"]
