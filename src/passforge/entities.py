from enum import StrEnum
from typing import Annotated, Iterator, Literal, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from passforge.charsets import CharacterClass


class InvalidRequestError(ValueError):
    "Raised when a generation request contradicts itself."


class InvalidLevelError(ValueError):
    "Raised when a complexity level is outside 1-10."


class ComponentParseError(ValueError):
    "Raised when a component description cannot be turned into a component."


MIN_PASSWORD_LENGTH = 4
SCORE_CEILING = 15


class ClassQuota(BaseModel):
    enabled: bool = True
    minimum: int = Field(default=1, ge=0)

    model_config = ConfigDict(frozen=True)


class GenerationRequest(BaseModel):
    length: int = Field(default=12, ge=1)
    lowercase: ClassQuota = ClassQuota()
    uppercase: ClassQuota = ClassQuota()
    digits: ClassQuota = ClassQuota()
    special: ClassQuota = ClassQuota()
    exclude_ambiguous: bool = False

    model_config = ConfigDict(frozen=True)

    def quotas(self) -> Iterator[tuple[CharacterClass, ClassQuota]]:
        yield CharacterClass.LOWERCASE, self.lowercase
        yield CharacterClass.UPPERCASE, self.uppercase
        yield CharacterClass.DIGITS, self.digits
        yield CharacterClass.SPECIAL, self.special

    def enabled_classes(self) -> list[CharacterClass]:
        return [char_class for char_class, quota in self.quotas() if quota.enabled]

    def total_minimum(self) -> int:
        return sum(quota.minimum for _, quota in self.quotas() if quota.enabled)

    def minimum_for(self, char_class: CharacterClass) -> int:
        for cls, quota in self.quotas():
            if cls == char_class:
                return quota.minimum if quota.enabled else 0
        raise KeyError(char_class)

    def check(self) -> None:
        """Raise InvalidRequestError if no password can satisfy this request."""
        if self.length < MIN_PASSWORD_LENGTH:
            raise InvalidRequestError(
                f"Password too short: length must be at least {MIN_PASSWORD_LENGTH}"
            )
        if not self.enabled_classes():
            raise InvalidRequestError("No character types selected")
        if self.total_minimum() > self.length:
            raise InvalidRequestError(
                f"Requirements exceed password length ({self.total_minimum()} > {self.length})"
            )


class ComplexityLevel(BaseModel):
    level: int = Field(ge=1, le=10)
    description: str
    request: GenerationRequest

    model_config = ConfigDict(frozen=True)


class ComponentKind(StrEnum):
    TEXT = "text"
    WORD = "word"
    RANDOM_CHARS = "chars"
    NUMBER = "number"
    SEPARATOR = "separator"


DEFAULT_SEPARATORS: tuple[str, ...] = ("-", "_", ".", "!", "@", "#")


class TextComponent(BaseModel):
    kind: Literal[ComponentKind.TEXT] = ComponentKind.TEXT
    value: str

    model_config = ConfigDict(frozen=True, extra="forbid")


class WordComponent(BaseModel):
    """A dictionary word.

    Case flags are applied by priority: capitalize, uppercase, lowercase,
    random_case. `replacements` swaps lowercase a/e/i/o/s for 4/3/1/0/5.
    """

    kind: Literal[ComponentKind.WORD] = ComponentKind.WORD
    min_length: int = Field(default=3, ge=1)
    max_length: int = Field(default=10, ge=1)
    capitalize: bool = False
    uppercase: bool = False
    lowercase: bool = False
    random_case: bool = False
    replacements: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")


class RandomCharsComponent(BaseModel):
    kind: Literal[ComponentKind.RANDOM_CHARS] = ComponentKind.RANDOM_CHARS
    length: int = Field(default=4, ge=0)
    types: list[CharacterClass] = Field(
        default_factory=lambda: [
            CharacterClass.LOWERCASE,
            CharacterClass.UPPERCASE,
            CharacterClass.DIGITS,
        ]
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class NumberComponent(BaseModel):
    kind: Literal[ComponentKind.NUMBER] = ComponentKind.NUMBER
    min: int = 0
    max: int = 9999
    padding: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def check_range(self) -> "NumberComponent":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


class SeparatorComponent(BaseModel):
    kind: Literal[ComponentKind.SEPARATOR] = ComponentKind.SEPARATOR
    options: list[str] = Field(default_factory=lambda: list(DEFAULT_SEPARATORS))

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("options")
    @classmethod
    def default_when_empty(cls, value: list[str]) -> list[str]:
        return value or list(DEFAULT_SEPARATORS)


AnyComponent = (
    TextComponent
    | WordComponent
    | RandomCharsComponent
    | NumberComponent
    | SeparatorComponent
)
Component = Annotated[AnyComponent, Field(discriminator="kind")]
ComponentSequence = Sequence[AnyComponent]


class StrengthLabel(StrEnum):
    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"
    EXCELLENT = "Excellent"


class StrengthReport(BaseModel):
    score: int = Field(ge=0)
    label: StrengthLabel
    length: int
    has_lowercase: bool
    has_uppercase: bool
    has_digits: bool
    has_special: bool
    unique_chars: int
    feedback: list[str] = []

    model_config = ConfigDict(frozen=True)

    @property
    def composition(self) -> list[str]:
        """Names of the character classes present, in registry order."""
        flags = (
            (CharacterClass.LOWERCASE, self.has_lowercase),
            (CharacterClass.UPPERCASE, self.has_uppercase),
            (CharacterClass.DIGITS, self.has_digits),
            (CharacterClass.SPECIAL, self.has_special),
        )
        return [str(char_class) for char_class, present in flags if present]
