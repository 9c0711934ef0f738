"""
Tag model
"""

import uuid
from sqlalchemy import Column, String, Uuid, CheckConstraint

from app.core.db import Base

class Tag(Base):
    __tablename__ = "tags"

    tag_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    tag_name = Column(String(100), nullable=False)

    __table_args__ = (
        CheckConstraint("length(trim(tag_name)) > 0", name="ck_tags_tag_name"),
    )
