import re
from dataclasses import dataclass


@dataclass
class ErrorDefinition:
    keywords: list[str]
    title: str
    description: str


# 标题查询失败的常见特征
LOOKUP_ERRORS = [
    ErrorDefinition(
        keywords=[
            "Sign in to confirm you're not a bot",
            "This playlist is private",
            "Private video",
        ],
        title="需要验证或无访问权限",
        description="YouTube 拒绝了匿名访问，该列表可能是私有的或需要登录。",
    ),
    ErrorDefinition(
        keywords=["does not exist", "The playlist does not exist", "404"],
        title="列表不存在",
        description="播放列表或频道不存在，可能已被删除或链接中的 ID 不完整。",
    ),
    ErrorDefinition(
        keywords=["quotaExceeded", "rateLimitExceeded", "429", "Too Many Requests"],
        title="请求过于频繁",
        description="已触发 YouTube 的配额或频率限制，请稍后再试。",
    ),
    ErrorDefinition(
        keywords=["keyInvalid", "API key not valid", "403"],
        title="API Key 无效",
        description="YouTube Data API 拒绝了请求，请检查配置中的 youtube_api_key。",
    ),
    ErrorDefinition(
        keywords=["Connection reset by peer", "Timeout", "timed out", "Connection refused"],
        title="网络连接失败",
        description="无法连接到 YouTube，可能是网络不稳定或代理配置有误。",
    ),
]


def parse_lookup_error(error_msg: str) -> tuple[str, str]:
    """
    将 yt-dlp 或 HTTP 的原始错误信息转换为 (标题, 描述) 元组。
    """
    if not error_msg:
        return "未知错误", "标题查询过程中发生未知错误。"

    clean_msg = " ".join(error_msg.splitlines())

    for err_def in LOOKUP_ERRORS:
        for keyword in err_def.keywords:
            if keyword.lower() in clean_msg.lower():
                return err_def.title, err_def.description

    # 兜底：尽量提取 ERROR: 后面的内容
    match = re.search(r"ERROR:\s*(.*?)(?:\n|$)", error_msg, flags=re.IGNORECASE)
    if match:
        extracted = match.group(1).strip()
        if len(extracted) > 100:
            extracted = extracted[:97] + "..."
        return "查询失败", extracted

    fallback = error_msg.strip()
    if len(fallback) > 100:
        fallback = fallback[:97] + "..."
    return "查询失败", fallback
