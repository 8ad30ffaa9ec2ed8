"""SQLAlchemy table definitions for the config store."""

from sqlalchemy import Column, MetaData, Table, Text

CONFIG_TABLE_NAME = "config"

metadata = MetaData()

config_table = Table(
    CONFIG_TABLE_NAME,
    metadata,
    Column("key", Text, primary_key=True),
    Column("value", Text, nullable=False),
)
