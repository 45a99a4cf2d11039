"""Simple entrypoint to run the packing engine's evaluation trips locally."""

from evaluation.harness import run_smoke_checks
from packr_app.config import PackrConfig
from packr_app.logging_config import configure_logging


def main() -> None:
    configure_logging(PackrConfig.from_env().log_level)
    for line in run_smoke_checks():
        print(line)


if __name__ == "__main__":
    main()
