from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings

from finslink import constants


class EncoderSettings(BaseSettings):
    # Reject out-of-range input instead of truncating it on the wire.
    strict: bool = Field(True, validation_alias="FINS_STRICT")

    gct: int = Field(constants.DEFAULT_GCT, validation_alias="FINS_GCT")
    dna: int = Field(constants.DEFAULT_DNA, validation_alias="FINS_DNA")
    da1: int = Field(constants.DEFAULT_DA1, validation_alias="FINS_DA1")
    da2: int = Field(constants.DEFAULT_DA2, validation_alias="FINS_DA2")
    sna: int = Field(constants.DEFAULT_SNA, validation_alias="FINS_SNA")
    sa1: int = Field(constants.DEFAULT_SA1, validation_alias="FINS_SA1")
    sa2: int = Field(constants.DEFAULT_SA2, validation_alias="FINS_SA2")
    sid: int = Field(constants.DEFAULT_SID, validation_alias="FINS_SID")

    trace_size: int = Field(200, validation_alias="FINS_TRACE_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> EncoderSettings:
    return EncoderSettings()
