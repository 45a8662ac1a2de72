"""HUD画面の状態管理

通知予約の状態遷移 (IDLE → READY → LOCKED) を管理する。
Streamlitのsession_stateに1インスタンスを保持し、永続化はしない。

状態遷移:
    IDLE   --calculate--> READY
    READY  --lock-------> LOCKED
    LOCKED --通知済み・取消--> READY (バックエンドの状態で判定)
    任意   --入力変更----> IDLE (計算結果は破棄)
"""

from schemas import AlertState, CalculationInputs, CalculationResult, SchedulerStatus


class HudSession:
    """HUD画面1セッション分の状態

    Attributes:
        inputs: 現在の入力スナップショット
        result: 直近の計算結果 (IDLEではNone)
        state: 通知予約状態
        error: 直近の通知予約エラーメッセージ
    """

    def __init__(self) -> None:
        self.inputs = CalculationInputs()
        self.result: CalculationResult | None = None
        self.state = AlertState.IDLE
        self.error: str | None = None

    def update_inputs(self, inputs: CalculationInputs) -> bool:
        """入力を更新する

        入力が変わった場合は計算結果を破棄してIDLEに戻す。

        Args:
            inputs: 新しい入力スナップショット

        Returns:
            bool: 予約済みの通知を取り消す必要がある場合True
        """
        if inputs == self.inputs:
            return False

        needs_cancel = self.state is AlertState.LOCKED
        self.inputs = inputs
        self.result = None
        self.error = None
        self.state = AlertState.IDLE
        return needs_cancel

    def calculate(self, result: CalculationResult) -> None:
        """計算結果を反映してREADYにする"""
        self.result = result
        self.error = None
        self.state = AlertState.READY

    def lock(self) -> None:
        """通知予約完了としてLOCKEDにする

        Raises:
            ValueError: READY以外、または有効な計算結果がない場合
        """
        if self.state is not AlertState.READY:
            raise ValueError(f"Cannot lock alert from state {self.state.value}")
        if self.result is None or not self.result.is_valid:
            raise ValueError("Cannot lock alert without a valid result")
        self.error = None
        self.state = AlertState.LOCKED

    def sync_backend_status(self, status: str) -> bool:
        """バックエンドの予約状態をLOCKEDに反映する

        通知済み (fired) や他セッションからの取り消し (idle) ならREADYに戻す。
        API不通 (unknown) などの場合は状態を変えない。

        Args:
            status: GET /api/notification の status

        Returns:
            bool: LOCKEDを解除した場合True
        """
        if self.state is not AlertState.LOCKED:
            return False
        if status not in (SchedulerStatus.FIRED.value, SchedulerStatus.IDLE.value):
            return False
        self.state = AlertState.READY
        return True

    def deny(self, message: str) -> None:
        """通知予約の失敗を記録する (状態はREADYのまま)"""
        self.error = message

    @property
    def can_arm(self) -> bool:
        """通知予約ボタンを押せるか"""
        return (
            self.state is AlertState.READY
            and self.result is not None
            and self.result.is_valid
        )
