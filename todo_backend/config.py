from typing import List, Tuple

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from . import __version__


class Settings(BaseSettings):
    """服务配置（固定默认值，不读取环境变量或 .env 文件）"""

    app_name: str = "Todo API"
    version: str = __version__
    host: str = "0.0.0.0"
    port: int = 8787
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # 只接受构造参数
        return (init_settings,)


settings = Settings()
