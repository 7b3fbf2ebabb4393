"""기본 마을 주민 시드 데이터"""

from typing import List

from src.core.npc.models import PersonalityProfile, Position
from src.core.population import RosterEntry


def default_roster() -> List[RosterEntry]:
    """Maya(대장장이), Tom(제빵사), Elder(장로)"""
    return [
        # 내향적이지만 충직
        RosterEntry(
            name="Maya",
            personality=PersonalityProfile(
                openness=0.3,
                conscientiousness=0.9,
                extraversion=0.2,
                agreeableness=0.6,
                neuroticism=0.3,
                greed=0.2,
                loyalty=0.8,
                curiosity=0.4,
                humor=0.3,
                romance=0.7,
            ),
            position=Position(200.0, 200.0),
        ),
        # 외향적이고 호기심 많음
        RosterEntry(
            name="Tom",
            personality=PersonalityProfile(
                openness=0.7,
                conscientiousness=0.6,
                extraversion=0.9,
                agreeableness=0.8,
                neuroticism=0.4,
                greed=0.1,
                loyalty=0.6,
                curiosity=0.9,
                humor=0.7,
                romance=0.8,
            ),
            position=Position(600.0, 200.0),
        ),
        # 현명하지만 신경질적
        RosterEntry(
            name="Elder",
            personality=PersonalityProfile(
                openness=0.9,
                conscientiousness=0.8,
                extraversion=0.3,
                agreeableness=0.5,
                neuroticism=0.8,
                greed=0.1,
                loyalty=0.7,
                curiosity=0.8,
                humor=0.4,
                romance=0.1,
            ),
            position=Position(400.0, 100.0),
        ),
    ]
