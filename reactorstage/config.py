from pydantic_settings import BaseSettings

from .model import ReactorModel


class ReactorSettings(BaseSettings):
    conversion: float = 0.5
    two_outputs: bool = False
    split_ratio: float = 0.5
    log_level: str = "WARNING"

    class Config:
        env_prefix = "REACTORSTAGE_"

    def build_model(self) -> ReactorModel:
        return ReactorModel(
            conversion=self.conversion,
            two_outputs=self.two_outputs,
            split_ratio=self.split_ratio,
        )


def get_settings() -> ReactorSettings:
    return ReactorSettings()
