from sqlalchemy import Column, Index, Integer, Text
from shortlink_app.database.connection import Base


class URLMapping(Base):
    """
    Alias -> URL mapping.
    
    The target URL is stored verbatim; no normalization happens here.
    """
    __tablename__ = "url"
    __table_args__ = (
        Index("idx_alias", "alias"),
        # AUTOINCREMENT: ids of deleted rows are never handed out again
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    alias = Column(Text, nullable=False, unique=True)
    url = Column(Text, nullable=False)
