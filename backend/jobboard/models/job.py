from sqlalchemy import JSON, Column, Integer, Text
from jobboard.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Text, primary_key=True)
    title = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    salary = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    requirements = Column(JSON, nullable=False)
    deadline = Column(Text, nullable=False)
    vacancy = Column(Integer, nullable=False, default=1)
    preferred_gender = Column(Text, nullable=False, default="Any")
    created_at = Column(Text, nullable=False)
