from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    username: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone: str = Field(min_length=1)
    address: str = Field(min_length=1)
    aadhar: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    email: str
    password: str


class User(BaseModel):
    """A registered user as loaded from the ``users`` collection.

    ``password`` holds the bcrypt hash; it is excluded from serialization so
    the model can never leak it through a response.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    name: str
    email: str
    phone: str
    address: str
    aadhar: str
    password: str = Field(exclude=True)
