from enum import Enum

class PersonalityTrait(str, Enum):
    OPENNESS = "openness"
    CONSCIENTIOUSNESS = "conscientiousness"
    EXTRAVERSION = "extraversion"
    AGREEABLENESS = "agreeableness"
    NEUROTICISM = "neuroticism"      # Higher = less emotionally stable

class InterestArea(str, Enum):
    REALISTIC = "realistic"          # Building, fixing, hands-on
    INVESTIGATIVE = "investigative"  # Research, analysis
    ARTISTIC = "artistic"            # Creative expression, design
    SOCIAL = "social"                # Helping, teaching
    ENTERPRISING = "enterprising"    # Leading, persuading
    CONVENTIONAL = "conventional"    # Organization, data, structure

class CognitiveAbility(str, Enum):
    LOGICAL_REASONING = "logical_reasoning"
    VERBAL_ABILITY = "verbal_ability"
    PROBLEM_SOLVING = "problem_solving"
    NUMERICAL_APTITUDE = "numerical_aptitude"
