"""
Configuration centrale de l'application via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de données MongoDB
    MONGO_URI: str = ""
    MONGO_DB_NAME: str = "counseling"
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # Serveur HTTP
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Hachage des mots de passe (bcrypt)
    BCRYPT_ROUNDS: int = 10

    # Environnement
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
