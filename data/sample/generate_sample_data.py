"""
Generate a sample patient import file for SepsisWatch demos.
Writes the three built-in scenarios, optionally followed by synthetic
patients with randomized vitals, labs and heart-rate trends.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np

# Allow running as a script from anywhere in the repo
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from sepsiswatch.data.samples import get_sample_payload  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# (normal range, septic range) per vital
VITAL_RANGES = {
    'hr': ((60, 100), (100, 140)),     # beats/min
    'rr': ((12, 20), (22, 32)),        # breaths/min
    'sbp': ((105, 140), (75, 100)),    # mmHg
    'temp': ((36.3, 37.5), (38.0, 39.8)),  # Deg C
}

LAB_RANGES = {
    'wbc': ((4.5, 11.0), (12.0, 25.0)),
    'lactate': ((0.5, 1.8), (2.0, 6.0)),
    'crp': ((0, 10), (40, 250)),
}

DEFAULT_OUTPUT = Path(__file__).resolve().parent / "patients.json"


def generate_patient(rng, patient_number, is_septic):
    """Generate one synthetic patient in import payload form."""
    pick = 1 if is_septic else 0

    vitals = {
        name: round(float(rng.uniform(*ranges[pick])), 1)
        for name, ranges in VITAL_RANGES.items()
    }
    vitals['ams'] = bool(is_septic and rng.random() < 0.5)

    labs = {
        name: round(float(rng.uniform(*ranges[pick])), 1)
        for name, ranges in LAB_RANGES.items()
    }

    # Random walk over the last 4 hours ending at the current heart rate
    steps = rng.normal(0, 3, size=4)
    offsets = np.concatenate([steps[::-1].cumsum()[::-1], [0.0]])
    hr_history = np.round(vitals['hr'] - offsets, 0)

    return {
        'info': {
            'id': f"S{patient_number:03d}",
            'name': f"Synthetic Patient {patient_number}",
            'age': int(rng.integers(18, 95)),
            'gender': str(rng.choice(['Male', 'Female'])),
        },
        'vitals': vitals,
        'labs': labs,
        'hrHistory': hr_history.tolist(),
    }


def main():
    parser = argparse.ArgumentParser(description="Generate a SepsisWatch sample patient file")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="Output JSON path")
    parser.add_argument("--synthetic", type=int, default=0, help="Number of synthetic patients to add")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    payload = get_sample_payload()

    for i in range(1, args.synthetic + 1):
        payload['patients'].append(generate_patient(rng, i, is_septic=i % 2 == 0))

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2)
        f.write('\n')

    logger.info(f"Wrote {len(payload['patients'])} patients to {args.output}")


if __name__ == "__main__":
    main()
