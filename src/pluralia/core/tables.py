"""
Built-in noun tables.

Every table here is immutable; engines copy what they need to mutate.
"""

from __future__ import annotations

from types import MappingProxyType

# Irregular plurals that don't follow the suffix rules
_IRREGULAR_PLURALS = {
    # Germanic
    "child": "children",
    "foot": "feet",
    "goose": "geese",
    "louse": "lice",
    "man": "men",
    "mouse": "mice",
    "ox": "oxen",
    "person": "people",
    "tooth": "teeth",
    "woman": "women",
    "die": "dice",
    # Compounds of foot/tooth
    "bigfoot": "bigfeet",
    "clubfoot": "clubfeet",
    "eyetooth": "eyeteeth",
    "sabertooth": "saberteeth",
    # Greek -on -> -a
    "criterion": "criteria",
    "phenomenon": "phenomena",
    "automaton": "automata",
    "polyhedron": "polyhedra",
    # -is -> -es
    "analysis": "analyses",
    "axis": "axes",
    "basis": "bases",
    "crisis": "crises",
    "diagnosis": "diagnoses",
    "ellipsis": "ellipses",
    "hypothesis": "hypotheses",
    "nemesis": "nemeses",
    "oasis": "oases",
    "parenthesis": "parentheses",
    "synopsis": "synopses",
    "synthesis": "syntheses",
    "thesis": "theses",
    # -us -> -i
    "alumnus": "alumni",
    "bacillus": "bacilli",
    "cactus": "cacti",
    "calculus": "calculi",
    "focus": "foci",
    "fungus": "fungi",
    "locus": "loci",
    "nucleus": "nuclei",
    "radius": "radii",
    "stimulus": "stimuli",
    "syllabus": "syllabi",
    # -um -> -a
    "addendum": "addenda",
    "atrium": "atria",
    "bacterium": "bacteria",
    "curriculum": "curricula",
    "datum": "data",
    "erratum": "errata",
    "medium": "media",
    "memorandum": "memoranda",
    "millennium": "millennia",
    "stadium": "stadia",
    "stratum": "strata",
    "symposium": "symposia",
    # -ex/-ix -> -ices
    "apex": "apices",
    "appendix": "appendices",
    "cortex": "cortices",
    "helix": "helices",
    "index": "indices",
    "matrix": "matrices",
    "vertex": "vertices",
    "vortex": "vortices",
    # Hebrew
    "cherub": "cherubim",
    "kibbutz": "kibbutzim",
    "seraph": "seraphim",
    # Italian
    "graffito": "graffiti",
    "libretto": "libretti",
    "virtuoso": "virtuosi",
    # French -eau -> -eaux
    "bureau": "bureaux",
    "chateau": "chateaux",
    "plateau": "plateaux",
    # -f -> -ves outside the vesification set
    "hoof": "hooves",
    "scarf": "scarves",
    "wharf": "wharves",
}

IRREGULAR_PLURALS = MappingProxyType(_IRREGULAR_PLURALS)

IRREGULAR_SINGULARS = MappingProxyType(
    {plural: singular for singular, plural in _IRREGULAR_PLURALS.items()}
)

# Latin/Greek plurals, only used when classical ancient mode is active
CLASSICAL_PLURALS = MappingProxyType(
    {
        # -a -> -ae
        "alga": "algae",
        "alumna": "alumnae",
        "amoeba": "amoebae",
        "antenna": "antennae",
        "arena": "arenae",
        "aurora": "aurorae",
        "cornea": "corneae",
        "formula": "formulae",
        "hernia": "herniae",
        "lacuna": "lacunae",
        "lamina": "laminae",
        "larva": "larvae",
        "minutia": "minutiae",
        "nausea": "nauseae",
        "nebula": "nebulae",
        "nova": "novae",
        "persona": "personae",
        "retina": "retinae",
        "supernova": "supernovae",
        "vertebra": "vertebrae",
        "vita": "vitae",
        "zona": "zonae",
        # -pus -> -podes
        "octopus": "octopodes",
        "platypus": "platypodes",
        # -us -> -era/-ora
        "corpus": "corpora",
        "genus": "genera",
        "opus": "opera",
        "viscus": "viscera",
    }
)

# Words whose plural is the same as the singular
UNCHANGED_PLURALS = frozenset(
    {
        "aircraft",
        "barracks",
        "chassis",
        "cod",
        "corps",
        "deer",
        "fish",
        "gallows",
        "headquarters",
        "means",
        "moose",
        "offspring",
        "pike",
        "salmon",
        "series",
        "sheep",
        "shrimp",
        "species",
        "squid",
        "swine",
        "trout",
        "tuna",
    }
)

# Animals with both an unchanged (classical) and a regular (modern) plural
HERD_ANIMALS = frozenset(
    {
        "antelope",
        "bison",
        "buffalo",
        "caribou",
        "elk",
        "grouse",
        "wildebeest",
    }
)

# -f/-fe words that become -ves
VES_WORDS = frozenset(
    {
        "calf",
        "elf",
        "half",
        "knife",
        "leaf",
        "life",
        "loaf",
        "self",
        "sheaf",
        "shelf",
        "thief",
        "wife",
        "wolf",
    }
)

# Stems whose singular ends in -fe rather than -f (knives -> knife)
FE_STEMS = frozenset({"kni", "wi", "li"})

# Consonant + o words that only take -s
O_TAKES_S = frozenset(
    {
        "albino",
        "alto",
        "archipelago",
        "armadillo",
        "auto",
        "basso",
        "canto",
        "casino",
        "combo",
        "commando",
        "contralto",
        "disco",
        "dodo",
        "dynamo",
        "embryo",
        "espresso",
        "euro",
        "fiasco",
        "flamingo",
        "ghetto",
        "grotto",
        "inferno",
        "kilo",
        "limo",
        "maestro",
        "magneto",
        "manifesto",
        "memo",
        "metro",
        "mosquito",
        "motto",
        "otto",
        "photo",
        "piano",
        "pimento",
        "placebo",
        "polo",
        "poncho",
        "portfolio",
        "pro",
        "quarto",
        "ratio",
        "rhino",
        "silo",
        "solo",
        "soprano",
        "stiletto",
        "stucco",
        "studio",
        "taco",
        "tattoo",
        "tempo",
        "tobacco",
        "tornado",
        "torso",
        "tuxedo",
        "video",
        "virtuoso",
        "volcano",
        "zero",
    }
)

# -man words that take a plain -s (German -> Germans)
MAN_TAKES_S = frozenset(
    {
        "caiman",
        "cayman",
        "doberman",
        "german",
        "leman",
        "norman",
        "ottoman",
        "roman",
        "shaman",
        "talisman",
        "walkman",
    }
)

# Nationality endings that never change (Chinese, Iroquois)
INVARIANT_ENDINGS = ("ese", "ois")
