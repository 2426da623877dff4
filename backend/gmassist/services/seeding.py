# backend/gmassist/services/seeding.py
"""Predefined regions of the Legacy of the Two Braziers setting."""
import logging
from typing import List, Tuple

from sqlalchemy.orm import Session

from gmassist.models.enums import RegionType, PoliticalStance
from gmassist.models.region import Region
from gmassist.models.scenario import Scenario

logger = logging.getLogger(__name__)


DEFAULT_REGIONS = [
    {
        "name": "Cité Médicale",
        "type": RegionType.CITY,
        "description": "Clean white towers around the last working hospital. Its healers trade "
                       "medicine and surgery for fuel and protection.",
        "controlling_faction": "Les Blouses Blanches",
        "population": 15000,
        "resources": ["medicine", "technology"],
        "threat_level": 2,
        "political_stance": PoliticalStance.NEUTRAL,
    },
    {
        "name": "Cité du Carburant",
        "type": RegionType.SETTLEMENT,
        "description": "A refinery town wrapped in black smoke. Whoever controls its pipelines "
                       "controls every convoy on the coast.",
        "controlling_faction": "Les Raffineurs",
        "population": 12000,
        "resources": ["fuel", "technology"],
        "threat_level": 3,
        "political_stance": PoliticalStance.HOSTILE,
    },
    {
        "name": "Cité Industrielle",
        "type": RegionType.SETTLEMENT,
        "description": "Forges and assembly halls that never sleep. The smiths build the "
                       "vehicles and tools the other cities cannot make.",
        "controlling_faction": "Les Forgerons d'Acier",
        "population": 25000,
        "resources": ["metal", "technology", "machinery"],
        "threat_level": 2,
        "political_stance": PoliticalStance.NEUTRAL,
    },
    {
        "name": "Cité de l'Eau & Alimentation",
        "type": RegionType.FORTRESS,
        "description": "Walled greenhouses built over a clean aquifer. The guardians feed half "
                       "the region and ration it as they see fit.",
        "controlling_faction": "Les Gardiens de la Source",
        "population": 18000,
        "resources": ["food", "water", "seeds"],
        "threat_level": 4,
        "political_stance": PoliticalStance.FRIENDLY,
    },
    {
        "name": "Cité du Divertissement",
        "type": RegionType.TRADE_HUB,
        "description": "Arenas, radio towers and neon bazaars. Rumours are bought and sold here "
                       "faster than water.",
        "controlling_faction": "Les Faiseurs de Rêves",
        "population": 20000,
        "resources": ["information", "entertainment", "propaganda"],
        "threat_level": 1,
        "political_stance": PoliticalStance.NEUTRAL,
    },
    {
        "name": "Nuke City",
        "type": RegionType.CITY,
        "description": "A city grown around an open-air reactor. Power is cheap, radiation is "
                       "everywhere and the cult in charge worships the core.",
        "controlling_faction": "Le Réacteur à Ciel Ouvert",
        "population": 8000,
        "resources": ["energy", "technology", "weapons"],
        "threat_level": 5,
        "political_stance": PoliticalStance.HOSTILE,
    },
    {
        "name": "Cité des Métaux & Recyclage",
        "type": RegionType.SETTLEMENT,
        "description": "Scrap mountains picked clean by diggers. Anything lost in the wasteland "
                       "eventually turns up on their stalls.",
        "controlling_faction": "Les Fossoyeurs",
        "population": 10000,
        "resources": ["metal", "rare_materials", "salvage"],
        "threat_level": 3,
        "political_stance": PoliticalStance.NEUTRAL,
    },
    {
        "name": "Cité de l'Armement & Défense",
        "type": RegionType.FORTRESS,
        "description": "Bunkers and firing ranges behind three rings of walls. The arsenals "
                       "arm every faction that can pay.",
        "controlling_faction": "Les Arsenaux",
        "population": 22000,
        "resources": ["weapons", "explosives", "armor"],
        "threat_level": 5,
        "political_stance": PoliticalStance.HOSTILE,
    },
    {
        "name": "L'Île des Anciens",
        "type": RegionType.CITY,
        "description": "An island spared by the war where old families live as if nothing "
                       "happened. Few outsiders are allowed to land.",
        "controlling_faction": "Le Paradis Perdu",
        "population": 5000,
        "resources": ["pre_war_tech", "abundant_food", "clean_water"],
        "threat_level": 1,
        "political_stance": PoliticalStance.NEUTRAL,
    },
    {
        "name": "Bunker Oméga",
        "type": RegionType.FORTRESS,
        "description": "A sealed military complex run by its own machines. Its agents watch "
                       "every other city and answer to no one.",
        "controlling_faction": "Les Fantômes d'Acier",
        "population": 3000,
        "resources": ["advanced_tech", "ai", "espionage"],
        "threat_level": 5,
        "political_stance": PoliticalStance.HOSTILE,
    },
]


def list_regions(db: Session, scenario_id) -> List[Region]:
    return db.query(Region).filter(
        Region.scenario_id == scenario_id
    ).order_by(Region.created_at, Region.name).all()


def seed_default_regions(db: Session, scenario: Scenario) -> Tuple[List[Region], bool]:
    """Add the default regions to a scenario that has none.

    Returns the scenario's regions and whether they were created. The caller
    commits, so seeding shares the transaction of whatever triggered it.
    """
    existing = list_regions(db, scenario.id)
    if existing:
        return existing, False

    regions = [
        Region(scenario_id=scenario.id, **dict(data, resources=list(data["resources"])))
        for data in DEFAULT_REGIONS
    ]
    db.add_all(regions)
    db.flush()
    logger.info(f"Seeded {len(regions)} default regions into scenario {scenario.id}")
    return regions, True
