# =============================================================================
# SYMPTOM LEMMAS
# =============================================================================
# Casual language, slang, regional variants, medical terms and common
# misspellings mapped to canonical symptom categories.
#
# Keys are stored exactly as they must match after normalization: lowercase,
# single-spaced, no stemming. Inflections are listed explicitly
# ("tire", "tired", "tiredness"), and so are hyphen/slash variants
# ("boom-bust", "boom/bust", "boom bust").
#
# Words deliberately left out live in vocab/declined_terms.py.
# =============================================================================

from typing import Dict

SYMPTOM_LEMMA_SECTIONS: Dict[str, Dict[str, str]] = {
    "fatigue_energy": {
        "exhaust": "fatigue",
        "exhausted": "fatigue",
        "exhaustion": "fatigue",
        "tire": "fatigue",
        "tired": "fatigue",
        "tiredness": "fatigue",
        "wipe": "fatigue",
        "wiped": "fatigue",
        "fatigue": "fatigue",
        "fatigued": "fatigue",
        "drain": "fatigue",
        "drained": "fatigue",
        "spent": "fatigue",
        "depleted": "fatigue",
        "knackered": "fatigue",
        "shattered": "fatigue",
        "zonked": "fatigue",
        "pooped": "fatigue",
        "bushed": "fatigue",
        "beat": "fatigue",
        "wrecked": "fatigue",
        "destroyed": "fatigue",
        "sluggish": "fatigue",
        "lethargic": "fatigue",
        "lethargy": "fatigue",
        "listless": "fatigue",
        "weary": "fatigue",
        "weariness": "fatigue",
        "enervated": "fatigue",
        "suffering": "fatigue",
        "zombified": "fatigue",
        "zombie": "fatigue",
        "toast": "fatigue",
        "cooked": "fatigue",
        "rooted": "fatigue",
        "buggered": "fatigue",
        "gassed": "fatigue",
        "tuckered": "fatigue",
        "rundown": "fatigue",
        "haggard": "fatigue",
    },
    "pem_post_exertional_malaise": {
        "crash": "pem",
        "crashed": "pem",
        "payback": "pem",
        "pem": "pem",
        "flare": "flare",
        "flaring": "flare",
        "flareup": "flare",
        "relapse": "flare",
        "relapsing": "flare",
        "overdid": "pem",
        "overexerted": "pem",
        "overexertion": "pem",
        "pushed": "pem",
        "boom": "pem",
    },
    "brain_fog_cognitive": {
        "foggy": "brain_fog",
        "fog": "brain_fog",
        "fuzzy": "brain_fog",
        "cloudy": "brain_fog",
        "scattered": "brain_fog",
        "spacey": "brain_fog",
        "spacy": "brain_fog",
        "hazy": "brain_fog",
        "muddled": "brain_fog",
        "muddy": "brain_fog",
        "confused": "brain_fog",
        "confusion": "brain_fog",
        "disoriented": "brain_fog",
        "forgetful": "memory",
        "forgetfulness": "memory",
        "forgetting": "memory",
        "distracted": "focus",
        "unfocused": "focus",
        "concentration": "focus",
        "concentrate": "focus",
        "focusing": "focus",
        "fried": "brain_fog",
        "loopy": "brain_fog",
        "braindead": "brain_fog",
        "blanking": "brain_fog",
        "drippy": "brain_fog",
        "dicey": "brain_fog",
    },
    "general_pain": {
        "ache": "pain",
        "achy": "pain",
        "aching": "pain",
        "hurt": "pain",
        "hurts": "pain",
        "hurting": "pain",
        "pain": "pain",
        "painful": "pain",
        "sore": "pain",
        "soreness": "pain",
        "tender": "pain",
        "tenderness": "pain",
        "throbbing": "pain",
        "throb": "pain",
        "stabbing": "pain",
        "sharp": "pain",
        "burning": "pain",
        "stinging": "pain",
        "cutting": "pain",
        "discomfort": "pain",
        "agony": "pain",
        "agonizing": "pain",
        "excruciating": "pain",
        "searing": "pain",
        "radiating": "pain",
        "gnawing": "pain",
        "pulsating": "pain",
        "pulsing": "pain",
        "shooting": "pain",
    },
    "headache": {
        "migraine": "headache",
        "migraines": "headache",
        "headache": "headache",
        "headaches": "headache",
        "cephalalgia": "headache",
        # broad association, pending clinical review
        "head": "headache",
    },
    "muscle_pain": {
        "muscle": "muscle_pain",
        "muscles": "muscle_pain",
        "myalgia": "muscle_pain",
        "myalgias": "muscle_pain",
    },
    "joint_pain": {
        "joint": "joint_pain",
        "joints": "joint_pain",
        "stiff": "stiffness",
        "stiffness": "stiffness",
        "arthralgia": "joint_pain",
        "arthralgias": "joint_pain",
        "swollen": "swelling",
        "swelling": "swelling",
    },
    "back_neck_pain": {
        "back": "back_pain",
        "neck": "neck_pain",
        "chest": "chest_pain",
    },
    "eds_hypermobility": {
        "subluxation": "subluxation",
        "subluxed": "subluxation",
        "subluxing": "subluxation",
        "dislocated": "dislocation",
        "dislocation": "dislocation",
        "dislocating": "dislocation",
        "hypermobile": "hypermobility",
        "hypermobility": "hypermobility",
        "loosey": "hypermobility",
        "bendy": "hypermobility",
        "unstable": "joint_instability",
        "instability": "joint_instability",
    },
    "sleep": {
        "insomnia": "insomnia",
        "sleepless": "insomnia",
        "insomniac": "insomnia",
        "restless": "sleep_disturbance",
        "unrefreshed": "unrefreshing_sleep",
        "unrefreshing": "unrefreshing_sleep",
        "wired": "sleep_disturbance",
    },
    "hypersomnia": {
        "oversleep": "hypersomnia",
        "oversleeping": "hypersomnia",
        "overslept": "hypersomnia",
        "hypersomnia": "hypersomnia",
        "somnolent": "hypersomnia",
        "drowsy": "hypersomnia",
        "drowsiness": "hypersomnia",
    },
    "cardiac_pots": {
        "palpitation": "palpitations",
        "palpitations": "palpitations",
        "palpitating": "palpitations",
        "race": "palpitations",
        "racing": "palpitations",
        "flutter": "palpitations",
        "fluttering": "palpitations",
        "tachy": "palpitations",
        "tachycardia": "palpitations",
        "bradycardia": "bradycardia",
        "arrhythmia": "arrhythmia",
        "skipping": "palpitations",
    },
    "orthostatic_dysautonomia": {
        "pots": "orthostatic",
        "orthostatic": "orthostatic",
        "dysautonomia": "dysautonomia",
        "presyncope": "presyncope",
        "presyncopal": "presyncope",
        "pooling": "blood_pooling",
    },
    "dizziness_vertigo": {
        "dizzy": "dizziness",
        "dizziness": "dizziness",
        "lightheaded": "dizziness",
        "lightheadedness": "dizziness",
        "faint": "fainting",
        "fainted": "fainting",
        "fainting": "fainting",
        "syncope": "fainting",
        "vertigo": "vertigo",
        "spinning": "vertigo",
        "woozy": "dizziness",
        "unsteady": "dizziness",
        "wobbly": "dizziness",
        "giddy": "dizziness",
        "swimmy": "dizziness",
        "floaty": "dizziness",
    },
    "gastrointestinal": {
        "nausea": "nausea",
        "nauseous": "nausea",
        "nauseated": "nausea",
        "queasy": "nausea",
        "queasiness": "nausea",
        "gaggy": "nausea",
        "gagging": "nausea",
        "heaving": "nausea",
        "retching": "nausea",
        "bilious": "nausea",
        "puke": "vomiting",
        "puked": "vomiting",
        "puking": "vomiting",
        "vomit": "vomiting",
        "vomited": "vomiting",
        "vomiting": "vomiting",
        "threw": "vomiting",
        "bloat": "bloating",
        "bloated": "bloating",
        "bloating": "bloating",
        "gassy": "bloating",
        "constipated": "constipation",
        "constipation": "constipation",
        "diarrhea": "diarrhea",
        "diarrhoea": "diarrhea",
        "ibs": "ibs",
        "reflux": "reflux",
        "heartburn": "reflux",
        "gerd": "reflux",
        "gastroparesis": "gastroparesis",
    },
    "neurological": {
        "tingle": "numbness_tingling",
        "tingling": "numbness_tingling",
        "tingles": "numbness_tingling",
        "tingly": "numbness_tingling",
        "numb": "numbness_tingling",
        "numbness": "numbness_tingling",
        "paresthesia": "numbness_tingling",
        "paresthesias": "numbness_tingling",
    },
    "tremor": {
        "tremor": "tremor",
        "tremors": "tremor",
        "shake": "tremor",
        "shaking": "tremor",
        "shaky": "tremor",
        "shakiness": "tremor",
        "tremble": "tremor",
        "trembling": "tremor",
        "vibrating": "tremor",
        "jittery": "tremor",
        "jitters": "tremor",
        "twitching": "twitching",
        "twitches": "twitching",
        "twitch": "twitching",
        "spasm": "spasm",
        "spasms": "spasm",
        "spasming": "spasm",
    },
    "respiratory": {
        "breathless": "shortness_of_breath",
        "breathe": "shortness_of_breath",
        "breathing": "shortness_of_breath",
        "dyspnea": "shortness_of_breath",
        "wheezy": "wheezing",
        "wheeze": "wheezing",
        "wheezing": "wheezing",
        "cough": "cough",
        "coughing": "cough",
    },
    "mood_emotional": {
        "depressed": "low_mood",
        "depression": "low_mood",
        "sad": "low_mood",
        "sadness": "low_mood",
        "hopeless": "low_mood",
        "hopelessness": "low_mood",
        "crying": "low_mood",
        "tearful": "low_mood",
        "weepy": "low_mood",
        "blue": "low_mood",
        "despair": "low_mood",
        "anxious": "anxiety",
        "anxiety": "anxiety",
        "worried": "anxiety",
        "worry": "anxiety",
        "worrying": "anxiety",
        "panic": "panic",
        "panicky": "panic",
        "panicking": "panic",
        "stressed": "stress",
        "stress": "stress",
        "overwhelmed": "overwhelmed",
        "overwhelming": "overwhelmed",
        "nervous": "anxiety",
        "scared": "anxiety",
        "terrified": "anxiety",
        "fear": "anxiety",
        "irritable": "irritability",
        "irritability": "irritability",
        "irritated": "irritability",
        "frustrated": "irritability",
        "frustrating": "irritability",
        "frustration": "frustration",
        "cranky": "irritability",
        "grumpy": "irritability",
        "annoyed": "irritability",
        "snappy": "irritability",
        "moody": "mood_swings",
    },
    "expanded_emotional_states": {
        "empty": "emptiness",
        "emptiness": "emptiness",
        "hollow": "emptiness",
        "void": "emptiness",
        "worthless": "worthlessness",
        "worthlessness": "worthlessness",
        "helpless": "helplessness",
        "despairing": "despair",
        "devastated": "devastation",
        "grief": "grief",
        "grieving": "grief",
        "mourning": "grief",
        "bereaved": "grief",
        "loneliness": "loneliness",
        "lonely": "loneliness",
    },
    "anger_spectrum": {
        "rage": "rage",
        "enraged": "rage",
        "furious": "rage",
        "fury": "rage",
        "angry": "anger",
        "anger": "anger",
        "mad": "anger",
        "livid": "rage",
        "seething": "rage",
        "resentment": "resentment",
        "resentful": "resentment",
        "bitter": "bitterness",
        "bitterness": "bitterness",
        "hostile": "hostility",
        "hostility": "hostility",
    },
    "shame_guilt": {
        "shame": "shame",
        "ashamed": "shame",
        "shameful": "shame",
        "guilt": "guilt",
        "guilty": "guilt",
        "regret": "regret",
        "regretful": "regret",
        "humiliated": "humiliation",
        "humiliation": "humiliation",
        "embarrassed": "embarrassment",
        "embarrassment": "embarrassment",
    },
    "dissociation_spectrum": {
        "dissociate": "dissociation",
        "dissociated": "dissociation",
        "dissociating": "dissociation",
        "unreality": "derealization",
        "unreal": "derealization",
        "dreamlike": "derealization",
        "robotic": "depersonalization",
        "autopilot": "dissociation",
        "zoned": "dissociation",
    },
    "temperature_dysregulation": {
        "sweating": "sweating",
        "sweaty": "sweating",
        "sweats": "sweating",
        "chills": "chills",
        "chilly": "chills",
        "feverish": "fever",
        "fever": "fever",
        "overheating": "heat_intolerance",
        "overheated": "heat_intolerance",
        "freezing": "cold_intolerance",
        "flushing": "flushing",
        "flushed": "flushing",
    },
    "weakness": {
        "weak": "weakness",
        "weakness": "weakness",
        "feeble": "weakness",
        "limp": "weakness",
    },
    "sensory_sensitivity": {
        "photophobia": "light_sensitivity",
        "photosensitive": "light_sensitivity",
        "photosensitivity": "light_sensitivity",
        "phonophobia": "sound_sensitivity",
        "hyperacusis": "sound_sensitivity",
    },
    "appetite": {
        "appetite": "appetite_change",
        "hungry": "appetite_change",
        "starving": "appetite_change",
        "anorexia": "appetite_loss",
    },
    "skin_autoimmune": {
        "rash": "rash",
        "rashes": "rash",
        "hives": "hives",
        "itchy": "itching",
        "itching": "itching",
        "itch": "itching",
        "bruise": "bruising",
        "bruised": "bruising",
        "bruising": "bruising",
        "malar": "rash",
        "butterfly": "rash",
        "raynauds": "raynauds",
        "raynaud": "raynauds",
        "lump": "lump",
        "lumps": "lump",
    },
    "hair_nail": {
        "hairloss": "hair_loss",
        "alopecia": "hair_loss",
        "shedding": "hair_loss",
    },
    "vision": {
        "blurry": "vision_changes",
        "blurred": "vision_changes",
        "blurriness": "vision_changes",
        "floaters": "vision_changes",
        "aura": "aura",
        "auras": "aura",
    },
    "swelling_inflammation": {
        "puffy": "swelling",
        "puffiness": "swelling",
        "edema": "swelling",
        "oedema": "swelling",
        "inflamed": "inflammation",
        "inflammation": "inflammation",
    },
    "mouth_throat": {
        "drymouth": "dry_mouth",
        "ulcer": "mouth_ulcers",
        "ulcers": "mouth_ulcers",
        "sorethroat": "sore_throat",
    },
    "bleeding": {
        "bleeding": "bleeding",
        "bleed": "bleeding",
    },
    "general_malaise": {
        "malaise": "malaise",
        "unwell": "malaise",
        "sick": "malaise",
        "lousy": "malaise",
        "rough": "malaise",
        "awful": "malaise",
        "terrible": "malaise",
        "horrible": "malaise",
        "miserable": "malaise",
        "dreadful": "malaise",
        "rotten": "malaise",
        "crummy": "malaise",
        "crappy": "malaise",
        "rubbish": "malaise",
    },
    "menstrual_hormonal": {
        "menstrual": "menstruation",
        "menstruation": "menstruation",
        "pms": "pms",
        "pmdd": "pmdd",
        "cycle": "menstrual_cycle",
        "spotting": "spotting",
        "hormonal": "hormonal",
        "hormone": "hormonal",
        "estrogen": "hormonal",
        "progesterone": "hormonal",
        "ovulation": "ovulation",
    },
    "ptsd_trauma": {
        "ptsd": "ptsd",
        "flashback": "flashback",
        "flashbacks": "flashback",
        "triggered": "ptsd_trigger",
        "triggering": "ptsd_trigger",
        "hypervigilant": "hypervigilance",
        "hypervigilance": "hypervigilance",
        "startle": "startle_response",
        "startled": "startle_response",
    },
    "ocd": {
        "ocd": "ocd",
        "obsessive": "obsessive_thoughts",
        "obsessing": "obsessive_thoughts",
        "compulsive": "compulsions",
        "compulsion": "compulsions",
        "compulsions": "compulsions",
        "ritualistic": "compulsions",
        "checking": "checking_compulsions",
        "repeating": "repetitive_behaviors",
    },
    "adhd": {
        "adhd": "adhd",
        "hyperfocus": "hyperfocus",
        "hyperfocused": "hyperfocus",
        "hyperfixation": "hyperfixation",
        "understimulated": "understimulation",
        "overstimulated": "overstimulation",
        "executive": "executive_dysfunction",
        "paralysis": "task_paralysis",
    },
    "bipolar": {
        "bipolar": "bipolar",
        "manic": "mania",
        "mania": "mania",
        "hypomanic": "hypomania",
        "hypomania": "hypomania",
        "elevated": "elevated_mood",
        "grandiose": "grandiosity",
        "grandiosity": "grandiosity",
    },
    "autism_spectrum": {
        "autistic": "autistic_traits",
        "autism": "autistic_traits",
        "stimming": "stimming",
        "meltdown": "autistic_meltdown",
        "shutdown": "autistic_shutdown",
        "masking": "masking",
        "scripting": "scripting",
    },
    "borderline_personality": {
        "bpd": "bpd",
        "splitting": "splitting",
        "abandonment": "abandonment_fears",
    },
    "eating_disorders": {
        "eating": "eating_disorder",
        "binge": "binge_eating",
        "binged": "binge_eating",
        "bingeing": "binge_eating",
        "purge": "purging",
        "purged": "purging",
        "purging": "purging",
        "restrict": "food_restriction",
        "restricting": "food_restriction",
        "restricted": "food_restriction",
    },
    "substance_use": {
        "substance": "substance_use",
        "cravings": "cravings",
        "craving": "cravings",
        "withdrawal": "withdrawal",
    },
    "sensory_expansion": {
        "distortion": "sensory_distortion",
        "allodynia": "allodynia",
    },
    "skin_expansion": {
        "petechiae": "petechiae",
    },
    "urinary": {
        "urinary": "urinary",
        "urgency": "urinary_urgency",
        "frequency": "urinary_frequency",
        "cystitis": "cystitis",
    },
    "immune": {
        "infection": "infection",
        "infections": "infections",
        "healing": "slow_healing",
        "glands": "swollen_glands",
    },
    "weight_metabolism": {
        # broad association, pending clinical review
        "weight": "weight_change",
        "metabolic": "metabolic",
        "metabolism": "metabolic",
    },
    "activity_exertion": {
        "recovery": "delayed_recovery",
    },
    "cognitive_symptoms": {
        "ruminating": "rumination",
        "rumination": "rumination",
        "overthinking": "overthinking",
        "overthink": "overthinking",
        "looping": "thought_loops",
        "perseverating": "perseveration",
        "perseveration": "perseveration",
        "perfection": "perfectionism",
        "perfectionism": "perfectionism",
        "perfectionist": "perfectionism",
        "indecisive": "indecisiveness",
        "indecisiveness": "indecisiveness",
    },
    "behavioral_symptoms": {
        "nightmare": "nightmares",
        "nightmares": "nightmares",
        "undereating": "undereating",
        "overeating": "overeating",
        "withdrawn": "social_withdrawal",
        "withdrawing": "social_withdrawal",
        "isolating": "social_isolation",
        "avoiding": "avoidance",
        "avoidance": "avoidance",
        "cancel": "canceling_plans",
        "canceled": "canceling_plans",
        "canceling": "canceling_plans",
        "flaking": "canceling_plans",
        "hiding": "hiding",
        "unmotivated": "lack_of_motivation",
        "procrastinating": "procrastination",
        "procrastination": "procrastination",
    },
    "physical_mental_health_symptoms": {
        "clenching": "jaw_clenching",
        "grinding": "teeth_grinding",
        "bruxism": "teeth_grinding",
    },
    "regional_variants_british": {
        "dodgy": "malaise",
        "wonky": "dizziness",
        "peaky": "malaise",
        "grotty": "malaise",
        "naff": "malaise",
        "ropy": "malaise",
        "poorly": "malaise",
    },
    "regional_variants_australian": {
        "crook": "malaise",
        "crocked": "malaise",
    },
    "long_covid_terminology": {
        "longhauler": "long_covid",
        "longcovid": "long_covid",
        "postcovid": "long_covid",
        "long hauler": "long_covid",
        "long covid": "long_covid",
        "covid-19": "long_covid",
        "covid symptoms": "long_covid",
    },
    "post_viral_general_post_infection": {
        "postviral": "post_viral",
        "post viral": "post_viral",
        "post-viral": "post_viral",
        "post covid": "post_viral",
        "postinfection": "post_viral",
        "post infection": "post_viral",
        "aftercovid": "post_viral",
        "persistentcovid": "long_covid",
    },
    "dysautonomia_related_concepts": {
        "airhunger": "air_hunger",
        "air hunger": "air_hunger",
        "cannot catch breath": "air_hunger",
        "can't catch breath": "air_hunger",
        "breathlessness": "air_hunger",
        "hunger for air": "air_hunger",
    },
    "sense_disruptions": {
        "parosmia": "parosmia",
        "dysgeusia": "dysgeusia",
        "taste distortion": "dysgeusia",
        "smell distortion": "parosmia",
        "altered taste": "dysgeusia",
        "altered smell": "parosmia",
        "things taste off": "dysgeusia",
        "things smell off": "parosmia",
        "metallic taste": "dysgeusia",
        "phantom taste": "dysgeusia",
        "phantom smell": "parosmia",
        "anosmia": "anosmia",
        "loss of smell": "anosmia",
        "lost smell": "anosmia",
        "ageusia": "ageusia",
        "loss of taste": "ageusia",
        "lost taste": "ageusia",
    },
    "viral_reactivation": {
        "reactivation": "viral_reactivation",
        "reactivations": "viral_reactivation",
        "reactivating": "viral_reactivation",
        "ebv": "ebv_reactivation",
        "epstein-barr": "ebv_reactivation",
        "hhv6": "viral_reactivation",
        "hhv-6": "viral_reactivation",
        "cmv": "viral_reactivation",
        "cytomegalovirus": "viral_reactivation",
        "herpesreactivation": "viral_reactivation",
        "herpes reactivation": "viral_reactivation",
    },
    "me_cfs": {
        "me": "me_cfs",
        "cfs": "me_cfs",
        "myalgic encephalomyelitis": "me_cfs",
        "chronic fatigue syndrome": "me_cfs",
        "myalgic": "me_cfs",
        "encephalomyelitis": "me_cfs",
    },
    "energy_pacing_concepts": {
        "energyenvelope": "energy_envelope",
        "energy envelope": "energy_envelope",
        "spoon management": "pacing",
        "managing spoons": "pacing",
        "boom bust": "boom_bust_cycle",
        "boom-bust": "boom_bust_cycle",
        "boom/bust": "boom_bust_cycle",
        "push crash": "push_crash_cycle",
        "push-crash": "push_crash_cycle",
        "push/crash": "push_crash_cycle",
    },
    "crash_patterns": {
        # "crash"/"crashed" stay under pem; the progressive form means an ongoing crash
        "crashing": "pem_crash",
        "crashed hard": "pem_crash",
        "severe crash": "pem_crash",
        "crash cycle": "pem_crash",
        "crash pattern": "pem_crash",
        "wiped out": "pem_crash",
        "total crash": "pem_crash",
        "bedbound": "severe_pem",
        "bed-bound": "severe_pem",
        "bedridden": "severe_pem",
        "housebound": "severe_pem",
        "house-bound": "severe_pem",
        "unable to function": "severe_pem",
    },
    "symptom_fluctuation": {
        "good days bad days": "symptom_fluctuation",
        "ups and downs": "symptom_fluctuation",
        "high and low days": "symptom_fluctuation",
        "variable symptoms": "symptom_fluctuation",
        "unpredictable": "unpredictable_course",
        "good day bad day": "good_bad_day_cycle",
    },
    "fibromyalgia": {
        "fibromyalgia": "fibromyalgia",
        "fibro": "fibromyalgia",
        "hyperalgesia": "hyperalgesia",
    },
    "common_misspellings": {
        "naseua": "nausea",
        "nauseas": "nausea",
        "dizy": "dizziness",
        "dizzyness": "dizziness",
        "fatige": "fatigue",
        "exaustion": "fatigue",
        "mussle": "muscle_pain",
        "heachache": "headache",
        "migren": "headache",
        "migrane": "headache",
    },
}
