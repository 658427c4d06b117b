from typing import Annotated

from pydantic import BaseModel, Field

GIB = 1024 ** 3

U64 = Annotated[int, Field(strict=True, ge=0, le=2 ** 64 - 1)]


class UsageSummary(BaseModel):
    monthly_bw_limit_b: U64
    bw_counter_b: U64
    bw_reset_day_of_month: U64


class UsageReport(BaseModel):
    used_gib: float
    limit_gib: float
    percent: float | None = None
    reset_day: int

    @classmethod
    def from_summary(cls, summary: UsageSummary) -> "UsageReport":
        used_gib = summary.bw_counter_b / GIB
        limit_gib = summary.monthly_bw_limit_b / GIB
        # a zero allotment has no meaningful ratio
        percent = 100 * used_gib / limit_gib if summary.monthly_bw_limit_b else None
        return cls(
            used_gib=used_gib,
            limit_gib=limit_gib,
            percent=percent,
            reset_day=summary.bw_reset_day_of_month,
        )

    def render(self) -> str:
        percent = f"{self.percent:.0f}%" if self.percent is not None else "N/A"
        return (
            f"已使用流量/总流量：{self.used_gib:.3f}GiB / {self.limit_gib:.3f}GiB\n"
            f"比例：{percent}\n"
            f"每月流量重置日期：{self.reset_day}日"
        )


class UsageCommand(BaseModel):
    url: str


class CurrentCommand(BaseModel):
    pass


BotCommandPayload = UsageCommand | CurrentCommand
