# app/data/types.py
from sqlalchemy import JSON, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB

# postgres: TEXT[] / JSONB, sqlite (testy): zwykly JSON
TextList = JSON(none_as_null=True).with_variant(ARRAY(Text), "postgresql")
JsonDocument = JSON(none_as_null=True).with_variant(JSONB(), "postgresql")
