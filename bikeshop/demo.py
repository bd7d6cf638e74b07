import logging
from typing import Any, Dict, Iterable, List, Optional

from bikeshop.config import ShopConfig
from bikeshop.domain.bicycle import Bicycle
from bikeshop.domain.customer import Customer
from bikeshop.domain.gear import Gear
from bikeshop.domain.mobility import Bear, Crab, Mobility
from bikeshop.domain.part import Part
from bikeshop.domain.wheel import RevealingReferences
from bikeshop.logger import setup_logging
from bikeshop.parts_factory import PartConfig, PartsFactory

logger = logging.getLogger(__name__)


def print_spares(config: Iterable[PartConfig], size: str = "L") -> List[Part]:
    """Build a bike from part config rows and print the parts it needs spares for"""
    bike = Bicycle(size=size, parts=PartsFactory.build(config))
    spares = list(bike.spares())

    print(bike.size)
    for part in spares:
        print(part)

    return spares


def run_demo(config: Optional[ShopConfig] = None) -> Dict[str, Any]:
    """Run each example in turn, printing as it goes"""
    if config is None:
        config = ShopConfig()
    setup_logging(config)
    logger.info("Starting bikeshop demo")

    results: Dict[str, Any] = {}

    print("Road bike spares:")
    results["road_spares"] = print_spares(config.road_parts, config.bike_size)

    print("\nMountain bike spares:")
    results["mountain_spares"] = print_spares(config.mountain_parts, config.bike_size)

    gear = Gear(chainring=52, cog=11)
    results["gear_ratio"] = gear.ratio
    print(f"\nGear ratio: {gear.ratio:.2f}")

    customer = Customer(name="Sarah", address="1 Spoke Lane")
    results["greeting"] = customer.greeting()
    print(results["greeting"])

    references = RevealingReferences([[622, 20], [622, 23]])
    results["diameters"] = references.diameters()
    print(f"Wheel diameters: {results['diameters']}")

    mobility = Mobility()
    results["moves"] = [Bear(mobility).move(), Crab(mobility).move()]
    for move in results["moves"]:
        print(move)

    logger.info("Finished bikeshop demo")
    return results
