from pydantic import BaseModel


class ApplicationRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    mobile: str | None = None
    qualifications: str | None = None
    jobTitle: str | None = None

    def is_complete(self) -> bool:
        values = (self.name, self.email, self.mobile, self.qualifications, self.jobTitle)
        return all(v and v.strip() for v in values)


class ApplicationResult(BaseModel):
    success: bool
    message: str
