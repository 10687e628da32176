import logging
from typing import Optional

from analytics.comparison import compare_stats
from analytics.report_generator import generate_report
from analytics.statistics import correlation_matrix
from common.utilities import make_rng
from data_generation.api import generate_all
from models.enums import MethodType

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SAMPLE_SIZE = 1000
METHOD = MethodType.VAE
SEED: Optional[int] = None


def main(
    sample_size: int = SAMPLE_SIZE,
    method: MethodType = METHOD,
    seed: Optional[int] = SEED,
    out_dir: str = "reports",
) -> str:
    try:
        data = generate_all(sample_size, make_rng(seed))
        synthetic_data = data.synthetic(method)
        logger.info(
            "Generated %d real and %d synthetic (%s) records",
            len(data.real),
            len(synthetic_data),
            method.name,
        )

        print(compare_stats(data.real, synthetic_data).to_string())
        print(correlation_matrix(synthetic_data).to_string())

        return generate_report(data.real, synthetic_data, out_dir)

    except Exception as e:
        logger.error(f"Error in data generation pipeline: {str(e)}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
