from pydantic import BaseModel, ConfigDict, constr
from pydantic.alias_generators import to_camel

# Le frontend parle en camelCase (firstName, userId, ...)
camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SignUpRequest(BaseModel):
    # Aucune validation de format ou de complexité, seulement la présence
    first_name: constr(min_length=1, max_length=100, strip_whitespace=True)
    last_name: constr(min_length=1, max_length=100, strip_whitespace=True)
    email: constr(min_length=1, max_length=256)
    password: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
                "password": "secret",
            }
        },
    )


class SignInRequest(BaseModel):
    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "ada@example.com",
                "password": "secret",
            }
        }
    )


class AuthResponse(BaseModel):
    user_id: int
    first_name: str
    last_name: str
    email: str
    message: str

    model_config = camel_config
