# =============================================================================
# DECLINED TERMS
# =============================================================================
# Common words that look like symptoms but, standing alone, mostly are not.
# They must never be added as bare keys; table construction fails if one is.
# Each entry names the phrase forms that carry the symptom meaning instead.
# =============================================================================

from typing import Any, Dict, List

DECLINED_TERMS: List[Dict[str, Any]] = [
    {
        "term": "energy",
        "reason": "too ambiguous on its own: 'got my energy back', 'energy drink'",
        "use_instead": ["no energy", "low energy", "zero energy", "energy crash"],
    },
    {
        "term": "down",
        "reason": "direction and idiom far more often than mood: 'sitting down', 'down the street', 'let down'",
        "use_instead": ["feeling down", "down in the dumps"],
    },
    {
        "term": "attack",
        "reason": "needs a qualifier: 'he attacked', 'heart attack', 'attack of the clones'",
        "use_instead": ["panic attack", "asthma attack", "anxiety attack"],
    },
    {
        "term": "flow",
        "reason": "'cash flow', 'workflow', 'go with the flow'",
        "use_instead": ["heavy flow"],
    },
    {
        "term": "period",
        "reason": "'period of time', 'period in history'",
        "use_instead": ["on my period", "period pain", "period cramps", "heavy period"],
    },
    {
        "term": "fall",
        "reason": "'I fell asleep', 'leaf fall', 'waterfall'",
        "use_instead": ["hair falling out"],
    },
    {
        "term": "cramp",
        "reason": "a pain qualifier; the location decides the symptom (stomach cramping, leg cramp)",
        "use_instead": ["stomach cramps", "period cramps", "menstrual cramps"],
    },
    {
        "term": "cramps",
        "reason": "a pain qualifier; the location decides the symptom (stomach cramping, leg cramp)",
        "use_instead": ["stomach cramps", "period cramps", "menstrual cramps"],
    },
    {
        "term": "cramping",
        "reason": "a pain qualifier; the location decides the symptom (stomach cramping, leg cramp)",
        "use_instead": ["stomach cramps"],
    },
    {
        "term": "sensitivity",
        "reason": "too broad without the sense it applies to",
        "use_instead": ["light sensitivity", "sound sensitivity", "smell sensitivity", "rejection sensitivity"],
    },
    {
        "term": "pacing",
        "reason": "'pacing the room', 'pacing myself'; the energy-management sense is carried by phrases",
        "use_instead": ["spoon management", "managing spoons", "pacing failure", "failed pacing"],
    },
]
