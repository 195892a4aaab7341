from pydantic import BaseModel, ConfigDict, Field, model_validator

ANONYMOUS_PLAYER = "Anonymous"

# The rules of one game. Built once by the difficulty menu and never changed.
class GameConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    difficulty_name: str = "Custom"
    min_value: int = 1
    max_value: int = 100
    # 0 means "unlimited"
    max_attempts: int = Field(0, ge=0)

    @model_validator(mode='after')
    def check_range(self):
        if self.min_value >= self.max_value:
            raise ValueError('min_value must be lower than max_value')
        return self

    @property
    def label(self) -> str:
        return f"{self.difficulty_name} ({self.min_value}-{self.max_value})"

    @property
    def range_size(self) -> int:
        return self.max_value - self.min_value + 1

# One finished game, exactly as it is stored in the leaderboard file.
class Result(BaseModel):
    model_config = ConfigDict(frozen=True)

    player_name: str
    difficulty: str
    attempts: int = Field(..., ge=0)
    elapsed_seconds: float = Field(..., ge=0.0)
    secret_number: int
    score: float = Field(..., ge=0.0)
    timestamp: str

    @property
    def is_anonymous(self) -> bool:
        return self.player_name == ANONYMOUS_PLAYER
