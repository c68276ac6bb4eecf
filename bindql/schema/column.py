"""Table and column metadata used by the rendering layer.

``SqlColumn`` is the *bindable column*: the name a mapping targets plus
optional type metadata.  Type metadata is only consulted by type-aware
rendering strategies (MyBatis ``#{...,jdbcType=...}`` bindings); the
named-parameter strategy ignores it entirely.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

_FROZEN = ConfigDict(frozen=True, extra="forbid")


class SqlTable(BaseModel):
    """A table reference.

    Attributes:
        name: Table name as it should appear in rendered SQL.
    """

    model_config = _FROZEN

    name: str

    def column(
        self,
        name: str,
        jdbc_type: str | None = None,
        type_handler: str | None = None,
        java_type: str | None = None,
    ) -> SqlColumn:
        """Return a :class:`SqlColumn` attached to this table.

        Example::

            foo = SqlTable(name="foo")
            id1 = foo.column("id1", jdbc_type="INTEGER")
        """
        return SqlColumn(
            name=name,
            table=self,
            jdbc_type=jdbc_type,
            type_handler=type_handler,
            java_type=java_type,
        )


class SqlColumn(BaseModel):
    """A column that parameters can be bound to.

    Attributes:
        name: Column name.
        table: Owning table, used for qualified references.
        jdbc_type: JDBC type name (e.g. ``INTEGER``, ``VARCHAR``).
        type_handler: Fully qualified type handler name for MyBatis.
        java_type: Java type hint for MyBatis.
    """

    model_config = _FROZEN

    name: str
    table: SqlTable | None = None
    jdbc_type: str | None = None
    type_handler: str | None = None
    java_type: str | None = None

    @field_validator("jdbc_type")
    @classmethod
    def _upper_jdbc_type(cls, v: str | None) -> str | None:
        return v.upper() if v else v

    @property
    def qualified_name(self) -> str:
        """``table.column`` when the column is attached to a table."""
        if self.table is None:
            return self.name
        return f"{self.table.name}.{self.name}"
