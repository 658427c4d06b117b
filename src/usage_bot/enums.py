from enum import StrEnum


class BotCommandEnum(StrEnum):
    usage = "usage"
    current = "current"
    help = "help"


COMMAND_DESCRIPTIONS: dict[BotCommandEnum, str] = {
    BotCommandEnum.usage: "立即获取流量信息",
    BotCommandEnum.current: "依据历史URL立即获取流量信息",
    BotCommandEnum.help: "显示可用命令",
}
