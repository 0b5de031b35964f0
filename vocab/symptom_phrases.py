# =============================================================================
# SYMPTOM PHRASES
# =============================================================================
# Multi-word expressions that identify a symptom as a whole: idioms
# ("running on empty"), spoon-theory talk, negated abilities ("can't sleep"),
# and the phrase forms that replace ambiguous bare words ("no energy",
# "feeling down", "panic attack", "heavy flow", "on my period").
#
# These sections are declared before the lemma sections, so a term declared
# in both places resolves to the lemma data.
# =============================================================================

from typing import Dict

SYMPTOM_PHRASE_SECTIONS: Dict[str, Dict[str, str]] = {
    "fatigue_energy": {
        "brain fog": "brain_fog",
        "bone tired": "fatigue",
        "bone-tired": "fatigue",
        "worn out": "fatigue",
        "burnt out": "burnout",
        "burned out": "burnout",
        "feel like death": "fatigue",
        "like death": "fatigue",
        "no energy": "fatigue",
        "low energy": "fatigue",
        "zero energy": "fatigue",
        "energy tank empty": "fatigue",
        "running on empty": "fatigue",
        "running on fumes": "fatigue",
        "hit a wall": "fatigue",
        "hitting the wall": "fatigue",
        "chugging along": "fatigue",
    },
    "spoon_theory": {
        "out of spoons": "spoon_theory",
        "no spoons": "spoon_theory",
        "low spoons": "spoon_theory",
        "spent all my spoons": "spoon_theory",
        "used up spoons": "spoon_theory",
        "negative spoons": "spoon_theory",
        "borrowing spoons": "spoon_theory",
        "spoon deficit": "spoon_theory",
        "spoon count": "spoon_theory",
        "low spoon day": "spoon_theory",
        "no spoon day": "spoon_theory",
    },
    "pem_crash": {
        "post exertional": "pem",
        "post-exertional": "pem",
        "post exertional malaise": "pem",
        "post-exertional malaise": "pem",
        "energy crash": "pem",
        "totally crashed": "pem",
        "complete crash": "pem",
        "major crash": "pem",
        "boom and bust": "pem",
        "pushed through": "pem",
        "pushed too hard": "pem",
        "overdid it": "pem",
        "paying for it": "pem",
        "paying the price": "pem",
    },
    "flare": {
        "in a flare": "flare",
        "flare up": "flare",
        "flare-up": "flare",
        "flaring up": "flare",
        "having a flare": "flare",
        "major flare": "flare",
        "full flare": "flare",
        "bad flare": "flare",
    },
    "cognitive": {
        "can't think": "brain_fog",
        "cant think": "brain_fog",
        "can't concentrate": "brain_fog",
        "cant concentrate": "brain_fog",
        "can't focus": "brain_fog",
        "cant focus": "brain_fog",
        "can't remember": "memory",
        "cant remember": "memory",
        "word finding": "cognitive_dysfunction",
        "word-finding": "cognitive_dysfunction",
        "can't find words": "cognitive_dysfunction",
        "losing words": "cognitive_dysfunction",
        "lost my words": "cognitive_dysfunction",
        "words not working": "brain_fog",
        "brain not working": "brain_fog",
        "brain isn't working": "brain_fog",
        "brain is mush": "brain_fog",
        "brain is soup": "brain_fog",
        "brain soup": "brain_fog",
        "head full of cotton": "brain_fog",
        "cotton wool head": "brain_fog",
        "thoughts are slow": "brain_fog",
        "slow thinking": "brain_fog",
        "thinking through mud": "brain_fog",
        "mental fog": "brain_fog",
        "cognitive dysfunction": "brain_fog",
        "fibro fog": "brain_fog",
        "pain fog": "brain_fog",
        "med fog": "brain_fog",
        "medication fog": "brain_fog",
    },
    "cardiac_pots": {
        "heart racing": "palpitations",
        "heart pounding": "palpitations",
        "heart fluttering": "palpitations",
        "heart is racing": "palpitations",
        "heart is pounding": "palpitations",
        "heart skipping": "palpitations",
        "heart skipped": "palpitations",
        "heart rate spiked": "palpitations",
        "hr spiked": "palpitations",
        "heart rate high": "palpitations",
        "resting heart rate high": "palpitations",
        "heart rate upon standing": "orthostatic",
        "hr on standing": "orthostatic",
        "standing heart rate": "orthostatic",
    },
    "orthostatic_pots": {
        "blood pooling": "blood_pooling",
        "can't stand": "orthostatic",
        "cant stand": "orthostatic",
        "standing up": "orthostatic",
        "upon standing": "orthostatic",
        "when i stand": "orthostatic",
        "trouble standing": "orthostatic",
        "hard to stand": "orthostatic",
        "stood up too fast": "orthostatic",
        "getting up": "orthostatic",
        "orthostatic intolerance": "orthostatic",
        "positional changes": "orthostatic",
        "changing position": "orthostatic",
    },
    "dizziness_fainting": {
        "head spinning": "vertigo",
        "room spinning": "vertigo",
        "almost fainted": "presyncope",
        "nearly fainted": "presyncope",
        "felt faint": "presyncope",
        "feeling faint": "presyncope",
        "about to pass out": "presyncope",
        "greyed out": "pre_syncope",
        "grayed out": "pre_syncope",
        "blacked out": "syncope",
        "passed out": "syncope",
        "lost consciousness": "syncope",
    },
    "neurological": {
        "pins and needles": "paresthesia",
        "pins needles": "paresthesia",
        "static feeling": "paresthesia",
        "electric shock": "numbness_tingling",
        "electric shocks": "numbness_tingling",
        "zaps": "numbness_tingling",
        "brain zaps": "numbness_tingling",
        "internal tremor": "tremor",
        "internal tremors": "tremor",
        "internal vibrations": "tremor",
        "inner trembling": "tremor",
    },
    "pain": {
        "killing me": "pain",
        "full body pain": "pain",
        "all over pain": "pain",
        "widespread pain": "pain",
        "chronic pain": "pain",
        "deep and painful": "pain",
    },
    "headache": {
        "splitting headache": "headache",
        "tension headache": "headache",
        "pressure headache": "headache",
        "head pounding": "headache",
        "head is killing me": "headache",
        "head pressure": "headache",
    },
    "back_neck_pain": {
        "back pain": "back_pain",
        "back ache": "back_pain",
        "back hurts": "back_pain",
        "neck pain": "neck_pain",
        "neck ache": "neck_pain",
        "neck hurts": "neck_pain",
        "chest pain": "chest_pain",
        "chest ache": "chest_pain",
        "chest hurts": "chest_pain",
    },
    "muscle_pain": {
        "muscle pain": "muscle_pain",
        "muscle aches": "muscle_pain",
        "muscles ache": "muscle_pain",
        "body aches": "muscle_pain",
        "body is aching": "muscle_pain",
    },
    "joint_issues": {
        "joint pain": "joint_pain",
        "joints hurt": "joint_pain",
        "joints ache": "joint_pain",
        "joint stiffness": "stiffness",
        "morning stiffness": "stiffness",
        "joints popping": "joint_instability",
        "joints cracking": "joint_instability",
        "joints grinding": "joint_instability",
        "joints slipping": "subluxation",
        "joint slipped": "subluxation",
        "partial dislocation": "subluxation",
        "popped out": "subluxation",
    },
    "respiratory": {
        "short of breath": "shortness_of_breath",
        "shortness of breath": "shortness_of_breath",
        "hard to breathe": "shortness_of_breath",
        "can't breathe": "shortness_of_breath",
        "cant breathe": "shortness_of_breath",
        "can't catch my breath": "shortness_of_breath",
        "out of breath": "shortness_of_breath",
        "chest tight": "chest_tightness",
        "chest is tight": "chest_tightness",
        "tight chest": "chest_tightness",
        "heavy chest": "chest_tightness",
        "chest pressure": "chest_tightness",
        "asthma attack": "asthma_attack",
        "bad cold": "respiratory_infection",
        "sinus infection": "respiratory_infection",
    },
    "sleep": {
        "can't sleep": "insomnia",
        "cant sleep": "insomnia",
        "couldn't sleep": "insomnia",
        "couldnt sleep": "insomnia",
        "trouble sleeping": "insomnia",
        "hard to sleep": "insomnia",
        "woke up tired": "unrefreshing_sleep",
        "woke up exhausted": "unrefreshing_sleep",
        "still tired": "unrefreshing_sleep",
        "never feel rested": "unrefreshing_sleep",
        "don't feel rested": "unrefreshing_sleep",
        "sleeping all day": "hypersomnia",
        "slept all day": "hypersomnia",
        "sleep too much": "hypersomnia",
        "can't stay awake": "hypersomnia",
        "waking up constantly": "sleep_disturbance",
        "keep waking up": "sleep_disturbance",
        "restless sleep": "sleep_disturbance",
        "tossing and turning": "sleep_disturbance",
    },
    "sensitivity": {
        "light hurts": "light_sensitivity",
        "lights hurt": "light_sensitivity",
        "sensitive to light": "light_sensitivity",
        "light sensitivity": "light_sensitivity",
        "too bright": "light_sensitivity",
        "sound hurts": "sound_sensitivity",
        "sounds hurt": "sound_sensitivity",
        "sensitive to sound": "sound_sensitivity",
        "sound sensitivity": "sound_sensitivity",
        "too loud": "sound_sensitivity",
        "noise sensitivity": "sound_sensitivity",
        "smell sensitivity": "smell_sensitivity",
        "sensitive to smells": "smell_sensitivity",
    },
    "flu_like": {
        "flu-like": "flu_like",
        "flu like": "flu_like",
        "like the flu": "flu_like",
        "have the flu": "flu_like",
        "feels like flu": "flu_like",
        "coming down with something": "flu_like",
    },
    "appetite": {
        "can't eat": "appetite_loss",
        "cant eat": "appetite_loss",
        "no appetite": "appetite_loss",
        "not hungry": "appetite_loss",
        "lost appetite": "appetite_loss",
        "food aversion": "appetite_loss",
        "can't keep food down": "nausea",
        "stomach upset": "nausea",
    },
    "gi": {
        "stomach pain": "gi_pain",
        "abdominal pain": "gi_pain",
        "belly pain": "gi_pain",
        "tummy pain": "gi_pain",
        "stomach cramps": "gi_cramping",
        "stomach churning": "nausea",
        "threw up": "vomiting",
        "throw up": "vomiting",
        "throwing up": "vomiting",
    },
    "mood": {
        "feeling low": "low_mood",
        "really low": "low_mood",
        "feeling down": "low_mood",
        "down in the dumps": "low_mood",
        "panic attack": "panic",
        "anxiety attack": "panic",
        "mental breakdown": "overwhelmed",
        "emotional rollercoaster": "mood_swings",
        "mental health": "mental_health",
        "taking a toll on my mental health": "mental_health",
    },
    "temperature": {
        "night sweats": "night_sweats",
        "hot and cold": "temperature_dysregulation",
        "hot or cold": "temperature_dysregulation",
        "can't regulate temperature": "temperature_dysregulation",
        "heat intolerance": "heat_intolerance",
        "can't handle heat": "heat_intolerance",
        "cold intolerance": "cold_intolerance",
        "can't handle cold": "cold_intolerance",
        "can't get warm": "cold_intolerance",
        "hot flashes": "hot_flashes",
        "hot flushes": "hot_flashes",
    },
    "weakness_mobility": {
        "jelly legs": "weakness",
        "legs like jelly": "weakness",
        "feel like jelly": "weakness",
        "legs gave out": "weakness",
        "legs buckling": "weakness",
        "legs wobbly": "weakness",
        "can't walk": "mobility",
        "trouble walking": "mobility",
        "hard to walk": "mobility",
        "unsteady on feet": "dizziness",
        "balance problems": "balance",
        "balance issues": "balance",
    },
    "autoimmune_skin": {
        "butterfly rash": "malar_rash",
        "sun sensitivity": "photosensitivity",
        "sun reactive": "photosensitivity",
        "skin burning": "skin_pain",
        "skin on fire": "skin_pain",
        "hair falling out": "hair_loss",
        "losing hair": "hair_loss",
        "hair thinning": "hair_loss",
        "hives from allergies": "hives",
    },
    "vision": {
        "blurry vision": "vision_changes",
        "vision blurry": "vision_changes",
        "double vision": "vision_changes",
        "seeing spots": "vision_changes",
        "visual disturbance": "vision_changes",
        "visual disturbances": "vision_changes",
    },
    "swelling": {
        "swollen glands": "swollen_lymph_nodes",
        "lymph nodes swollen": "swollen_lymph_nodes",
        "swollen lymph nodes": "swollen_lymph_nodes",
        "tender lymph nodes": "swollen_lymph_nodes",
    },
    "dry_symptoms": {
        "dry mouth": "dry_mouth",
        "dry eyes": "dry_eyes",
        "eyes dry": "dry_eyes",
        "gritty eyes": "dry_eyes",
        "sore throat": "sore_throat",
    },
    "smell_taste": {
        "no smell": "anosmia",
        "can't smell": "anosmia",
        "no taste": "dysgeusia",
        "can't taste": "dysgeusia",
        "taste weird": "dysgeusia",
        "smell weird": "parosmia",
        "distorted smell": "parosmia",
        "distorted taste": "dysgeusia",
    },
    "mast_cell_mcas": {
        "histamine reaction": "mcas",
        "allergic reaction": "allergic_reaction",
        "mast cell": "mcas",
        "mcas": "mcas",
        "mast cell activation": "mcas",
    },
    "casual_gen_z_language": {
        "feels like garbage": "malaise",
        "feel like garbage": "malaise",
        "feeling like garbage": "malaise",
        "feels like shit": "malaise",
        "feel like shit": "malaise",
        "feeling like shit": "malaise",
        "feels like ass": "malaise",
        "feel like ass": "malaise",
        "feeling like ass": "malaise",
        "feels like crap": "malaise",
        "feel like crap": "malaise",
        "feeling like crap": "malaise",
        "feels like hell": "malaise",
        "feel like hell": "malaise",
        "feeling like hell": "malaise",
        "feel like trash": "malaise",
        "feeling like trash": "malaise",
        "absolutely wrecked": "fatigue",
        "totally wrecked": "fatigue",
        "completely wrecked": "fatigue",
        "absolutely destroyed": "fatigue",
        "totally destroyed": "fatigue",
        "literally dead": "fatigue",
        "actually dead": "fatigue",
        "literally dying": "fatigue",
        "actually dying": "fatigue",
        "dead tired": "fatigue",
        "so dead": "fatigue",
        "im dead": "fatigue",
        "i'm dead": "fatigue",
        "cant even": "overwhelmed",
        "can't even": "overwhelmed",
        "cannot even": "overwhelmed",
        "hurts like hell": "pain",
        "hurts like a bitch": "pain",
        "hurts so bad": "pain",
        "pain is insane": "pain",
        "pain is crazy": "pain",
        "pain is wild": "pain",
        "pain is brutal": "pain",
        "brain is broken": "brain_fog",
        "brain is fried": "brain_fog",
        "brain not braining": "brain_fog",
        "head is fucked": "brain_fog",
        "can't brain": "brain_fog",
        "no thoughts": "brain_fog",
        "zero thoughts": "brain_fog",
        "brain empty": "brain_fog",
        "head empty": "brain_fog",
        "smooth brain": "brain_fog",
        "thoughts are broken": "brain_fog",
        "lowkey dying": "fatigue",
        "highkey dying": "fatigue",
        "lowkey exhausted": "fatigue",
        "highkey exhausted": "fatigue",
        "lowkey can't breathe": "shortness_of_breath",
        "highkey can't breathe": "shortness_of_breath",
        "lowkey panicking": "panic",
        "highkey panicking": "panic",
        "low key dying": "fatigue",
        "high key dying": "fatigue",
        "head feels like garbage": "headache",
        "head feels like shit": "headache",
        "body feels like garbage": "pain",
        "body feels like shit": "pain",
        "everything hurts": "pain",
        "absolutely exhausted": "fatigue",
        "literally exhausted": "fatigue",
        "absolutely drained": "fatigue",
        "literally drained": "fatigue",
        "so over this": "fatigue",
        "done with today": "fatigue",
        "body is done": "fatigue",
        "body gave up": "fatigue",
        "not functioning": "fatigue",
        "barely functioning": "fatigue",
        "nonfunctional": "fatigue",
    },
    "menstrual_hormonal_phrases": {
        "on my period": "menstruation",
        "period cramps": "menstrual_cramps",
        "menstrual cramps": "menstrual_cramps",
        "period pain": "menstrual_cramps",
        "heavy period": "heavy_bleeding",
        "heavy flow": "heavy_bleeding",
        "heavy bleeding": "heavy_bleeding",
        "irregular period": "irregular_cycle",
        "irregular cycle": "irregular_cycle",
        "missed period": "missed_period",
        "late period": "late_period",
        "breast tenderness": "breast_tenderness",
        "sore breasts": "breast_tenderness",
        "hormonal imbalance": "hormonal",
        "hormone changes": "hormonal",
        "time of month": "menstruation",
    },
    "long_covid_specific_phrases": {
        "ringing in ears": "tinnitus",
        "ears ringing": "tinnitus",
        "hearing changes": "hearing_changes",
        "dry eyes and mouth": "sicca",
        "dry mouth and eyes": "sicca",
    },
    "gi_expansion_phrases": {
        "trouble swallowing": "dysphagia",
        "hard to swallow": "dysphagia",
        "difficulty swallowing": "dysphagia",
        "food intolerance": "food_intolerance",
        "food intolerances": "food_intolerance",
        "food sensitivities": "food_intolerance",
        "stomach distension": "bloating",
        "abdominal distension": "bloating",
        "gut issues": "digestive",
        "digestive issues": "digestive",
    },
    "neurological_expansion_phrases": {
        "body vibrating": "tremor",
        "head zaps": "brain_zaps",
        "neuropathic pain": "nerve_pain",
        "sensory overload": "sensory_overload",
        "overwhelmed by stimuli": "sensory_overload",
        "too much stimulation": "sensory_overload",
        "alcohol intolerance": "alcohol_intolerance",
        "cant drink": "alcohol_intolerance",
        "can't drink": "alcohol_intolerance",
        "cant tolerate alcohol": "alcohol_intolerance",
    },
    "autonomic_pots_expansion_phrases": {
        "blood pressure low": "low_blood_pressure",
        "low blood pressure": "low_blood_pressure",
        "bp low": "low_blood_pressure",
        "blood pressure high": "high_blood_pressure",
        "high blood pressure": "high_blood_pressure",
        "bp high": "high_blood_pressure",
        "coat hanger pain": "coat_hanger_pain",
        "adrenaline surge": "adrenaline_surge",
        "adrenaline rush": "adrenaline_surge",
        "adrenaline dump": "adrenaline_surge",
    },
    "mental_health_expansion_phrases": {
        "intrusive thoughts": "intrusive_thoughts",
        "unwanted thoughts": "intrusive_thoughts",
        "racing thoughts": "racing_thoughts",
        "thoughts racing": "racing_thoughts",
        "emotional dysregulation": "emotional_dysregulation",
        "cant regulate emotions": "emotional_dysregulation",
        "can't regulate emotions": "emotional_dysregulation",
        "rejection sensitive": "rejection_sensitivity",
        "rejection sensitivity": "rejection_sensitivity",
        "suicidal thoughts": "suicidal_ideation",
        "thinking about death": "suicidal_ideation",
        "feeling detached": "dissociation",
        "out of body": "depersonalization",
        "dont feel real": "derealization",
        "don't feel real": "derealization",
        "nothing feels real": "derealization",
    },
    "sensory_expansion_phrases": {
        "visual snow": "visual_snow",
        "seeing static": "visual_snow",
        "light flashes": "visual_disturbances",
        "seeing flashes": "visual_disturbances",
        "sound distortion": "sound_distortion",
        "sounds distorted": "sound_distortion",
    },
    "skin_expansion_phrases": {
        "sensitive skin": "skin_sensitivity",
        "skin hurts": "allodynia",
        "skin pain": "allodynia",
        "touch hurts": "allodynia",
        "painful to touch": "allodynia",
        "easy bruising": "easy_bruising",
        "bruise easily": "easy_bruising",
        "red spots": "petechiae",
    },
    "urinary_phrases": {
        "need to pee": "urinary_urgency",
        "urinary urgency": "urinary_urgency",
        "frequent urination": "urinary_frequency",
        "peeing a lot": "urinary_frequency",
        "interstitial cystitis": "cystitis",
        "bladder pain": "cystitis",
    },
    "immune_phrases": {
        "keep getting sick": "frequent_infections",
        "always sick": "frequent_infections",
        "frequent infections": "frequent_infections",
        "wounds heal slowly": "slow_healing",
        "not healing": "slow_healing",
    },
    "weight_metabolism_phrases": {
        "weight gain": "weight_gain",
        "gaining weight": "weight_gain",
        "weight loss": "weight_loss",
        "losing weight": "weight_loss",
        "unexplained weight": "weight_change",
        "metabolic changes": "metabolic",
    },
    "activity_exertion_phrases": {
        "exercise intolerance": "exercise_intolerance",
        "cant exercise": "exercise_intolerance",
        "can't exercise": "exercise_intolerance",
        "activity intolerance": "activity_intolerance",
        "cant do activities": "activity_intolerance",
        "delayed recovery": "delayed_recovery",
        "slow recovery": "delayed_recovery",
        "not recovering": "delayed_recovery",
        "pacing failure": "pacing_failure",
        "failed pacing": "pacing_failure",
        "did too much": "overexertion",
    },
    "neuropathy_paresthesia": {
        "static electricity": "paresthesia",
        "electric feeling": "paresthesia",
        "buzzing sensation": "paresthesia",
        "tingling sensation": "paresthesia",
        "numbness and tingling": "paresthesia",
    },
    "cognitive_dysfunction": {
        "processing speed": "cognitive_dysfunction",
        "finding words": "cognitive_dysfunction",
        "cotton wool": "brain_fog",
        "words swimming": "brain_fog",
    },
    "syncope_pre_syncope": {
        "tunnel vision": "pre_syncope",
        "pre-syncope": "pre_syncope",
        "pre syncope": "pre_syncope",
        "vision going black": "pre_syncope",
        "vision tunneling": "pre_syncope",
    },
    "gastroparesis_gi": {
        "early satiety": "early_satiety",
        "feel full quickly": "early_satiety",
        "full after few bites": "early_satiety",
        "delayed emptying": "gastroparesis",
        "nothing moving": "gastroparesis",
        "feel full": "early_satiety",
    },
    "lupus_autoimmune": {
        "malar rash": "malar_rash",
        "raynaud's": "raynauds",
        "fingers turn blue": "raynauds",
        "fingers turn white": "raynauds",
        "fingers go white": "raynauds",
        "fingers go blue": "raynauds",
        "low grade fever": "fever",
        "mouth sores": "mouth_sores",
        "oral ulcers": "mouth_sores",
        "canker sores": "mouth_sores",
    },
    "swollen_sites": {
        "swollen knees": "swelling",
        "swollen joints": "swelling",
        "swollen ankles": "swelling",
        "swollen fingers": "swelling",
        "swollen hands": "swelling",
        "swollen feet": "swelling",
        "puffy face": "swelling",
        "puffy hands": "swelling",
    },
    "spoons_left": {
        "low on spoons": "spoon_theory",
        "no spoons left": "spoon_theory",
    },
    "fatigue_weakness": {
        "pushing my limits": "fatigue",
        "hit by a truck": "extreme_fatigue",
        "feel like a truck": "extreme_fatigue",
        "lead limbs": "weakness",
        "heavy limbs": "weakness",
        "limbs feel heavy": "weakness",
        "legs like lead": "weakness",
    },
    "light_sensitivity": {
        "light is too bright": "sensitivity_light",
        "hiding in the dark": "sensitivity_light",
        "cant handle light": "sensitivity_light",
        "can't handle light": "sensitivity_light",
        "bright lights": "sensitivity_light",
    },
    "dizziness": {
        "got so dizzy": "dizziness",
        "so dizzy": "dizziness",
        "really dizzy": "dizziness",
        "super dizzy": "dizziness",
    },
    "palpitations": {
        "heart rate spiking": "tachycardia",
        "heart rate is spiking": "tachycardia",
    },
    "brain_fog_variations": {
        "brain is complete soup": "brain_fog",
        "complete soup": "brain_fog",
    },
    "dissociation_depersonalization": {
        "floating outside my body": "depersonalization",
        "floating outside": "dissociation",
        "out of my body": "depersonalization",
        "outside my body": "depersonalization",
    },
}
