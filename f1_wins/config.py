"""
Project-wide configuration using Pydantic Settings.
API paging, scrape selectors, aggregation sizes, chart lookups and output
paths all live here.
"""
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


ROOT_DIR = Path(__file__).resolve().parent.parent


class APIConfig(BaseSettings):
    base_url: str = "https://api.jolpi.ca/ergast/f1"
    page_limit: int = 100
    offset_start: int = 0
    offset_end: int = 27000
    offset_step: int = 100
    rate_limit_delay: float = 0.5  # seconds slept after every request
    timeout: int = 30
    user_agent: str = "f1-wins/0.1"

    model_config = {"env_prefix": "F1W_API_"}

    def offsets(self) -> range:
        return range(self.offset_start, self.offset_end, self.offset_step)


class ScrapeConfig(BaseSettings):
    team_page_url: str = "https://www.formula1.com/en/teams"
    name_selector: str = "span.f1-heading"
    points_selector: str = "span.f1-heading-wide"

    # The teams page repeats each value in nested elements; one team is
    # recovered every `stride` nodes starting at `start`.
    name_stride: int = 5
    name_start: int = 0
    points_stride: int = 2
    points_start: int = 0

    timeout: int = 30
    user_agent: str = "Mozilla/5.0 (compatible; f1-wins/0.1)"

    model_config = {"env_prefix": "F1W_SCRAPE_"}


class AggregationConfig(BaseSettings):
    top_k_races: int = 25
    top_n_teams: int = 11  # top 10 plus one overflow slot
    other_label: str = "Other"

    model_config = {"env_prefix": "F1W_AGG_"}


class ChartConfig(BaseSettings):
    # Constructors shown in the cumulative stair-step view
    team_allow_list: list[str] = Field(default_factory=lambda: [
        "ferrari",
        "mclaren",
        "williams",
        "mercedes",
        "red_bull",
        "team_lotus",
        "renault",
        "brabham",
    ])
    team_colors: dict[str, str] = Field(default_factory=lambda: {
        "ferrari": "#DC0000",
        "mclaren": "#FF8700",
        "williams": "#005AFF",
        "mercedes": "#00D2BE",
        "red_bull": "#1E41FF",
        "renault": "#FFF500",
        "brabham": "#2F6F4F",
        "team_lotus": "#FFB800",
        "tyrrell": "#800080",
        "Other": "#9E9E9E",
    })
    template: str = "plotly_white"
    image_format: str = "png"
    width: int = 1200
    height: int = 700

    model_config = {"env_prefix": "F1W_CHART_"}


class LogConfig(BaseSettings):
    level: str = "INFO"
    console_format: str = (
        "<green>{time:HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan> - <level>{message}</level>"
    )
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
    file_name: str = "f1_wins_{time:YYYY-MM-DD}.log"
    rotation: str = "1 day"
    retention: str = "7 days"

    model_config = {"env_prefix": "F1W_LOG_"}


class PathConfig(BaseSettings):
    root: Path = ROOT_DIR
    charts: Path = ROOT_DIR / "charts"
    logs: Path = ROOT_DIR / "logs"

    def setup(self) -> None:
        """Create all directories if they don't exist."""
        for field_name, path in self.model_dump().items():
            if isinstance(path, Path):
                path.mkdir(parents=True, exist_ok=True)

    model_config = {"env_prefix": "F1W_PATH_"}


class Config:
    """Unified project configuration."""

    api: APIConfig = APIConfig()
    scrape: ScrapeConfig = ScrapeConfig()
    aggregation: AggregationConfig = AggregationConfig()
    charts: ChartConfig = ChartConfig()
    paths: PathConfig = PathConfig()
    logging: LogConfig = LogConfig()


# Singleton instance
cfg = Config()
