from pydantic import BaseModel, ConfigDict, Field


class CalculationInputs(BaseModel):
    """退勤時刻計算の入力スナップショット

    画面の4つの数値入力欄をそのまま文字列で保持する。
    入力が変わるたびに新しいインスタンスを生成し、変更はしない (frozen)。
    数値として解釈できない値や空文字は計算時に0として扱われる。

    Attributes:
        completed_hours: 勤務済み時間 (時)
        completed_minutes: 勤務済み時間 (分, 通常0-59だが強制しない)
        last_entry_hours: 最終入室時刻 (時, 通常0-23)
        last_entry_minutes: 最終入室時刻 (分, 通常0-59)

    Examples:
        >>> inputs = CalculationInputs(
        ...     completed_hours="1",
        ...     completed_minutes="45",
        ...     last_entry_hours="10",
        ...     last_entry_minutes="0",
        ... )
        >>> inputs.model_dump(by_alias=True)["completedHrs"]
        '1'
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "completedHrs": "1",
                "completedMins": "45",
                "lastInHrs": "10",
                "lastInMins": "0",
            }
        },
    )

    completed_hours: str = Field(
        default="", alias="completedHrs", description="勤務済み時間 (時)"
    )
    completed_minutes: str = Field(
        default="", alias="completedMins", description="勤務済み時間 (分)"
    )
    last_entry_hours: str = Field(
        default="", alias="lastInHrs", description="最終入室時刻 (時)"
    )
    last_entry_minutes: str = Field(
        default="", alias="lastInMins", description="最終入室時刻 (分)"
    )

    def raw_fields(self) -> tuple[str, str, str, str]:
        """4つの入力欄を入力順に返す"""
        return (
            self.completed_hours,
            self.completed_minutes,
            self.last_entry_hours,
            self.last_entry_minutes,
        )

    @property
    def has_any_input(self) -> bool:
        """いずれかの入力欄に文字が入っているか"""
        return any(value != "" for value in self.raw_fields())


class CalculationResult(BaseModel):
    """退勤時刻の計算結果

    Attributes:
        hours: 退勤時刻 (時, 0-23に折り返し済み)
        minutes: 退勤時刻 (分)
        formatted: "HH:MM" 形式の文字列
        is_valid: いずれかの入力欄が空でなければTrue
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "hours": 16,
                "minutes": 15,
                "formatted": "16:15",
                "isValid": True,
            }
        },
    )

    hours: int = Field(..., description="退勤時刻 (時)")
    minutes: int = Field(..., description="退勤時刻 (分)")
    formatted: str = Field(..., description="HH:MM形式の退勤時刻")
    is_valid: bool = Field(default=False, alias="isValid", description="入力有無")
