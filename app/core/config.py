import os
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
	PROJECT_NAME: str = "Menu Management API"
	API_PREFIX: str = "/api"

	# Accept a direct URL (supports either DATABASE_URL or database_url env vars)
	database_url: str | None = None

	# Individual parts; used only when no explicit URL is set and DB_HOST is present
	DB_DRIVER: str = "postgresql+psycopg2"
	DB_HOST: str | None = None
	DB_USER: str = "postgres"
	DB_PASSWORD: str = ""
	DB_NAME: str = "menu"
	DB_PORT: int = 5432
	SQLITE_PATH: str = "./menu.db"

	SQL_ECHO: bool = False
	CREATE_TABLES_ON_STARTUP: bool = True

	CORS_ORIGINS: list[str] = ["*"]

	# Observability flags
	LOG_LEVEL: str = "INFO"
	ENABLE_REQUEST_LOGGING: bool = True
	LOG_SAMPLE_RATE: float = 1.0

	HOST: str = "0.0.0.0"
	PORT: int = int(os.getenv("PORT", 5000))

	# Prefer explicit database_url if provided; otherwise assemble from parts
	@property
	def DATABASE_URL(self) -> str:
		# 1) Value from settings (supports .env and OS env via BaseSettings)
		if self.database_url and self.database_url.strip():
			return self.database_url.strip()
		# 2) Raw OS env (e.g., uppercase on Windows), as a fallback
		explicit_url = os.getenv("DATABASE_URL")
		if explicit_url and explicit_url.strip():
			return explicit_url.strip()
		# 3) Assemble from parts when a server host is configured
		if self.DB_HOST:
			return f"{self.DB_DRIVER}://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
		# 4) Local SQLite file for development
		return f"sqlite:///{self.SQLITE_PATH}"

	# Pydantic v2 settings config
	model_config = SettingsConfigDict(
		env_file=".env",
		extra="ignore",
		case_sensitive=False,  # accept lowercase keys on Windows and in .env
	)

settings = Settings()
