from enum import Enum
from functools import lru_cache

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NodeEnvironment(str, Enum):
	DEVELOPMENT = 'development'
	TEST = 'test'
	PRODUCTION = 'production'


class CacheBackend(str, Enum):
	REDIS = 'redis'
	MEMORY = 'memory'


class RedisSettings(BaseModel):
	host: str = 'localhost'
	port: int = 6379
	db: int = 0
	ttl: int = Field(default=3600, gt=0, description='Rate cache TTL in seconds')
	timeout: float = 5.0

	@property
	def url(self) -> str:
		return f'redis://{self.host}:{self.port}/{self.db}'


class MonobankSettings(BaseModel):
	api_url: str
	timeout: float = 10.0


class Settings(BaseSettings):
	NODE_ENV: NodeEnvironment = NodeEnvironment.TEST
	HOST: str = '0.0.0.0'
	NODE_PORT: int = Field(default=3000, validation_alias=AliasChoices('nodePort', 'NODE_PORT'))

	redis: RedisSettings = RedisSettings()
	monobank: MonobankSettings

	CACHE_BACKEND: CacheBackend = CacheBackend.REDIS

	# Application
	APP_NAME: str = 'Currency Converter API'

	model_config = SettingsConfigDict(
		env_file='.env',
		env_nested_delimiter='__',
		case_sensitive=False,
		extra='ignore',
	)


@lru_cache
def get_settings() -> Settings:
	return Settings()
