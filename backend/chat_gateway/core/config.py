from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

SYSTEM_PROMPT = """あなたは温かく思いやりのある人生相談カウンセラーです。相談者の気持ちに寄り添い、優しく丁寧にアドバイスをしてください。

以下の点を心がけてください：
- 相談者の感情を受け止め、共感を示す
- 具体的で実践的なアドバイスを提供
- 希望と前向きな気持ちを与える
- 日本語で自然に話す
- 相談者を否定せず、建設的にサポートする"""


class Settings(BaseSettings):
    app_name: str = "Counsel Chat"
    debug: bool = False

    # LLM
    llm_provider: str = "openai"
    openai_api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")
    openai_model: str = "gpt-4o"
    temperature: float = 0.7
    max_tokens: int = 1000

    # Conversation
    system_prompt: str = SYSTEM_PROMPT
    fallback_reply: str = "申し訳ございません。回答を生成できませんでした。"
    title_max_length: int = 50

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["*"]
    cors_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_headers: list[str] = [
        "Origin",
        "X-Requested-With",
        "Content-Type",
        "Accept",
        "Authorization",
        "x-api-key",
    ]

    model_config = {
        "env_file": str(Path(__file__).resolve().parent.parent.parent / ".env"),
        "env_prefix": "COUNSEL_",
        "extra": "ignore",
        "populate_by_name": True,
    }


settings = Settings()
