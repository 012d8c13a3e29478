"""
Seed dataset generation.

Builds the catalog from a brand x appliance x model-family x code
blueprint. The copy is templated; only the code summaries vary per code.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path

from ..core.entry import build_entry_slug, slugify, to_title
from ..core.types import SEVERITIES, Entry


@dataclass(frozen=True)
class Brand:
    name: str
    slug: str
    appliances: tuple[str, ...]


BRANDS: tuple[Brand, ...] = (
    Brand("Samsung", "samsung", ("washer", "dryer", "dishwasher", "refrigerator", "ac")),
    Brand("LG", "lg", ("washer", "dryer", "dishwasher", "refrigerator", "ac")),
    Brand("Whirlpool", "whirlpool", ("washer", "dryer", "dishwasher", "refrigerator")),
    Brand("GE", "ge", ("washer", "dryer", "dishwasher", "refrigerator", "oven")),
    Brand("Bosch", "bosch", ("dishwasher", "refrigerator", "oven", "washer")),
    Brand("Frigidaire", "frigidaire", ("dishwasher", "refrigerator", "oven", "washer", "dryer")),
    Brand("Maytag", "maytag", ("washer", "dryer", "dishwasher")),
    Brand("KitchenAid", "kitchenaid", ("dishwasher", "refrigerator", "oven")),
    Brand("Kenmore", "kenmore", ("washer", "dryer", "dishwasher", "refrigerator")),
    Brand("Electrolux", "electrolux", ("washer", "dryer", "dishwasher", "refrigerator", "oven")),
    Brand("Haier", "haier", ("washer", "dryer", "refrigerator", "ac")),
    Brand("Midea", "midea", ("washer", "dishwasher", "ac", "refrigerator")),
)

MODEL_FAMILIES = ("Series 100", "Series 200", "Series 300")

# appliance -> [(code, summary), ...]
BLUEPRINT: dict[str, tuple[tuple[str, str], ...]] = {
    "washer": (
        ("OE", "Drain timeout detected"),
        ("IE", "Water fill delay"),
        ("UE", "Load imbalance detected"),
        ("LE", "Motor lock detected"),
        ("DE", "Door latch signal missing"),
        ("E1", "Water level pressure mismatch"),
        ("E2", "Temperature sensor range issue"),
        ("E3", "Excess suds condition"),
        ("F5", "Control board communication fault"),
        ("F9", "Drain performance low"),
        ("H2", "Heater response delay"),
        ("C1", "Cycle interruption detected"),
    ),
    "dryer": (
        ("D80", "Restricted airflow warning"),
        ("D90", "Severe vent blockage"),
        ("E1", "Thermistor value out of range"),
        ("E2", "Thermistor short/open"),
        ("F1", "Control relay fault"),
        ("F3", "Heating circuit issue"),
        ("PF", "Power interruption detected"),
        ("tE", "Temperature reading fault"),
        ("nP", "No line power detected"),
        ("L2", "Line voltage imbalance"),
        ("C9", "Door switch inconsistency"),
        ("H1", "Overheat protection event"),
    ),
    "dishwasher": (
        ("E15", "Leak protection activated"),
        ("E22", "Filter or drain blockage"),
        ("E24", "Drain path restriction"),
        ("E25", "Drain pump obstruction"),
        ("IE", "Inlet water timeout"),
        ("LE", "Water leak sensor trigger"),
        ("F2", "Overflow state detected"),
        ("F6", "Water distribution fault"),
        ("H3", "Heater not reaching target"),
        ("C1", "Cycle canceled by safety logic"),
        ("E1", "Door switch/lock state issue"),
        ("E4", "Spray arm performance low"),
    ),
    "refrigerator": (
        ("ER IF", "Ice fan speed fault"),
        ("ER FF", "Freezer fan speed fault"),
        ("ER RF", "Refrigerator fan speed fault"),
        ("ER DH", "Defrost cycle did not complete"),
        ("ER DS", "Defrost sensor issue"),
        ("E1", "Ambient sensor value invalid"),
        ("E2", "Freezer sensor value invalid"),
        ("E5", "Ice maker sensor issue"),
        ("H1", "High compartment temperature"),
        ("C3", "Compressor protection active"),
        ("F1", "Control communication fault"),
        ("dF", "Defrost drain concern"),
    ),
    "ac": (
        ("P1", "Drain or condensate protection"),
        ("P2", "High pressure protection"),
        ("E1", "Indoor/ambient sensor issue"),
        ("E5", "Current overload protection"),
        ("F0", "Refrigerant protection logic"),
        ("F1", "Indoor coil sensor issue"),
        ("F2", "Outdoor coil sensor issue"),
        ("H3", "Compressor overload protection"),
        ("C5", "Inverter module alert"),
        ("dF", "Defrost in progress/abnormal"),
        ("L3", "Fan speed feedback fault"),
        ("U8", "Communication retry lockout"),
    ),
    "oven": (
        ("F1", "Control key input fault"),
        ("F2", "Over-temperature detected"),
        ("F3", "Sensor open circuit"),
        ("F4", "Sensor short circuit"),
        ("F5", "Control board communication issue"),
        ("F7", "Latch motor feedback issue"),
        ("E1", "Temperature calibration drift"),
        ("E2", "Cooling fan response low"),
        ("E6", "Door lock timing issue"),
        ("C1", "Cycle canceled by safety"),
        ("H0", "Heating relay check failed"),
        ("P0", "Power integrity event"),
    ),
}

TOOLS = ("Flashlight", "Microfiber cloth", "Small brush", "Screwdriver set")
PREVENTIVE_TIPS = (
    "Run monthly maintenance cycles and clean filters on schedule.",
    "Avoid overloading and keep installation clearances within manufacturer guidance.",
    "Use surge protection where local power quality is inconsistent.",
)
ESTIMATED_FIX_TIME = "10-35 minutes"
WHEN_TO_STOP = (
    "Stop and call a licensed technician if the code reappears after two full restart "
    "attempts or if you detect heat, smoke, or water leakage."
)
UPDATED_AT = "2026-02-20"


def severity_for(slug: str, code: str) -> str:
    """Deterministic severity bucket derived from slug and code length."""
    return SEVERITIES[(len(slug) + len(code)) % len(SEVERITIES)]


def create_entry(brand: Brand, appliance: str, model_family: str, code: str, summary: str) -> Entry:
    slug = build_entry_slug(brand.slug, appliance, model_family, code)
    label = to_title(appliance)
    return Entry(
        slug=slug,
        code=code,
        brand=brand.name,
        brand_slug=brand.slug,
        appliance=appliance,
        appliance_slug=slugify(appliance),
        title=f"{brand.name} {label} {code} Error Code: Causes and Fixes",
        summary=summary,
        symptom=f"{label} stops cycle and shows {code}.",
        causes=(
            f"Intermittent {appliance} sensor reading outside expected range.",
            "Temporary power-state mismatch after a surge or abrupt cycle interruption.",
            f"Mechanical restriction in a core {appliance} subsystem (airflow, drain, or movement).",
            "Wiring harness connection seated loosely due to vibration over time.",
        ),
        steps=(
            "Power-cycle the unit for 3 minutes, then restart a short test cycle.",
            f"Inspect accessible filters, vents, or drains specific to your {appliance} and clear debris.",
            "Confirm the appliance is level and stable to avoid false sensor triggers.",
            "Run one empty maintenance cycle and observe whether the code returns.",
            "If repeated, inspect harness connections and service documentation for continuity checks.",
        ),
        tools=TOOLS,
        preventive_tips=PREVENTIVE_TIPS,
        when_to_stop=WHEN_TO_STOP,
        estimated_fix_time=ESTIMATED_FIX_TIME,
        model_family=model_family,
        updated_at=UPDATED_AT,
        severity=severity_for(slug, code),
    )


def generate_entries(
    brands: tuple[Brand, ...] = BRANDS,
    model_families: tuple[str, ...] = MODEL_FAMILIES,
    blueprint: dict[str, tuple[tuple[str, str], ...]] = BLUEPRINT,
) -> list[Entry]:
    """Expand the blueprint into entries: brand, then appliance, family, code."""
    entries: list[Entry] = []
    for brand in brands:
        for appliance in brand.appliances:
            for family in model_families:
                for code, summary in blueprint[appliance]:
                    entries.append(create_entry(brand, appliance, family, code, summary))
    return entries


def write_seed(output_path: Path, entries: list[Entry] | None = None) -> list[Entry]:
    """Generate (unless given) and write the dataset as an indented JSON array."""
    if entries is None:
        entries = generate_entries()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps([entry.to_dict() for entry in entries], ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    return entries
