'''
Environment-driven settings. Values are read from `LABDB_`-prefixed variables, e.g.

    LABDB_DATABASE_URL=sqlite:///data/lab.db
    LABDB_ECHO=true
'''
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = 'sqlite://'
    echo: bool = False

    model_config = SettingsConfigDict(
        env_prefix='LABDB_',
        env_file=None,
        extra='ignore',
    )


settings = Settings()
