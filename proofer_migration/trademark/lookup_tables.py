"""
lookup_tables.py  -  Proofer -> TRADEMARK_EXPERT Lookup Tables
==============================================================
Static enumeration tables used to normalize Proofer answers.

Every table is keyed by the canonical LOWERCASE source phrase or code.
Lookups go through mapper_utils.safe_lookup(), which lowercases the query
and returns None when the key is unknown.

Adding a newly recognized source phrase is a data change here, never a code
change in the section builders.

Tables
------
  STATE_NAME_TO_ID                 US state / territory name or code -> USPS code
  COUNTRY_ID_TO_NAME               ISO 3166-1 alpha-2 code -> country name
  ENTITY_TYPE_NAME_TO_ID           applicant_type_MC phrase -> entity type id
  SIGNATORY_TITLE_TO_POSITION_MAP  signatory title -> position id
  TYPE_OF_MARK_TO_PROTECT_MAP      type_of_mark_to_protect_MC -> markFormat
  YES_OR_NO_MAP                    yes/no variations -> "yes" | "no"
  INTEND_TO_USE_MARK_MAP           usage-intent phrase -> client-facing phrase
  CLAIM_NATURE_MAP                 AS_2_f_claim_nature_MC -> ClaimNature
  ALTERNATE_NAME_RULES             ordered substring rules for DBA / TA / AKA
"""

from __future__ import annotations

from typing import List, Tuple

from .models import ClaimNature


# =============================================================================
# US states and territories
# Keys: lowercase full name AND lowercase USPS code, both -> USPS code
# =============================================================================

_US_STATES: List[Tuple[str, str]] = [
    ("Alabama", "AL"), ("Alaska", "AK"), ("Arizona", "AZ"), ("Arkansas", "AR"),
    ("California", "CA"), ("Colorado", "CO"), ("Connecticut", "CT"),
    ("Delaware", "DE"), ("District of Columbia", "DC"), ("Florida", "FL"),
    ("Georgia", "GA"), ("Hawaii", "HI"), ("Idaho", "ID"), ("Illinois", "IL"),
    ("Indiana", "IN"), ("Iowa", "IA"), ("Kansas", "KS"), ("Kentucky", "KY"),
    ("Louisiana", "LA"), ("Maine", "ME"), ("Maryland", "MD"),
    ("Massachusetts", "MA"), ("Michigan", "MI"), ("Minnesota", "MN"),
    ("Mississippi", "MS"), ("Missouri", "MO"), ("Montana", "MT"),
    ("Nebraska", "NE"), ("Nevada", "NV"), ("New Hampshire", "NH"),
    ("New Jersey", "NJ"), ("New Mexico", "NM"), ("New York", "NY"),
    ("North Carolina", "NC"), ("North Dakota", "ND"), ("Ohio", "OH"),
    ("Oklahoma", "OK"), ("Oregon", "OR"), ("Pennsylvania", "PA"),
    ("Rhode Island", "RI"), ("South Carolina", "SC"), ("South Dakota", "SD"),
    ("Tennessee", "TN"), ("Texas", "TX"), ("Utah", "UT"), ("Vermont", "VT"),
    ("Virginia", "VA"), ("Washington", "WA"), ("West Virginia", "WV"),
    ("Wisconsin", "WI"), ("Wyoming", "WY"),
    # Territories
    ("American Samoa", "AS"), ("Guam", "GU"), ("Northern Mariana Islands", "MP"),
    ("Puerto Rico", "PR"), ("U.S. Virgin Islands", "VI"),
]

STATE_NAME_TO_ID: dict[str, str] = {
    **{name.lower(): code for name, code in _US_STATES},
    **{code.lower(): code for _, code in _US_STATES},
}


# =============================================================================
# Countries  (ISO 3166-1 alpha-2)
# =============================================================================

COUNTRY_ID_TO_NAME: dict[str, str] = {
    "af": "Afghanistan",
    "al": "Albania",
    "dz": "Algeria",
    "ad": "Andorra",
    "ao": "Angola",
    "ag": "Antigua and Barbuda",
    "ar": "Argentina",
    "am": "Armenia",
    "au": "Australia",
    "at": "Austria",
    "az": "Azerbaijan",
    "bs": "Bahamas",
    "bh": "Bahrain",
    "bd": "Bangladesh",
    "bb": "Barbados",
    "by": "Belarus",
    "be": "Belgium",
    "bz": "Belize",
    "bj": "Benin",
    "bm": "Bermuda",
    "bt": "Bhutan",
    "bo": "Bolivia",
    "ba": "Bosnia and Herzegovina",
    "bw": "Botswana",
    "br": "Brazil",
    "bn": "Brunei",
    "bg": "Bulgaria",
    "bf": "Burkina Faso",
    "bi": "Burundi",
    "kh": "Cambodia",
    "cm": "Cameroon",
    "ca": "Canada",
    "cv": "Cape Verde",
    "ky": "Cayman Islands",
    "cf": "Central African Republic",
    "td": "Chad",
    "cl": "Chile",
    "cn": "China",
    "co": "Colombia",
    "km": "Comoros",
    "cg": "Congo",
    "cd": "Democratic Republic of the Congo",
    "cr": "Costa Rica",
    "ci": "Cote d'Ivoire",
    "hr": "Croatia",
    "cu": "Cuba",
    "cy": "Cyprus",
    "cz": "Czech Republic",
    "dk": "Denmark",
    "dj": "Djibouti",
    "dm": "Dominica",
    "do": "Dominican Republic",
    "ec": "Ecuador",
    "eg": "Egypt",
    "sv": "El Salvador",
    "gq": "Equatorial Guinea",
    "er": "Eritrea",
    "ee": "Estonia",
    "sz": "Eswatini",
    "et": "Ethiopia",
    "fj": "Fiji",
    "fi": "Finland",
    "fr": "France",
    "ga": "Gabon",
    "gm": "Gambia",
    "ge": "Georgia",
    "de": "Germany",
    "gh": "Ghana",
    "gr": "Greece",
    "gd": "Grenada",
    "gt": "Guatemala",
    "gn": "Guinea",
    "gw": "Guinea-Bissau",
    "gy": "Guyana",
    "ht": "Haiti",
    "hn": "Honduras",
    "hk": "Hong Kong",
    "hu": "Hungary",
    "is": "Iceland",
    "in": "India",
    "id": "Indonesia",
    "ir": "Iran",
    "iq": "Iraq",
    "ie": "Ireland",
    "il": "Israel",
    "it": "Italy",
    "jm": "Jamaica",
    "jp": "Japan",
    "jo": "Jordan",
    "kz": "Kazakhstan",
    "ke": "Kenya",
    "ki": "Kiribati",
    "kp": "North Korea",
    "kr": "South Korea",
    "xk": "Kosovo",
    "kw": "Kuwait",
    "kg": "Kyrgyzstan",
    "la": "Laos",
    "lv": "Latvia",
    "lb": "Lebanon",
    "ls": "Lesotho",
    "lr": "Liberia",
    "ly": "Libya",
    "li": "Liechtenstein",
    "lt": "Lithuania",
    "lu": "Luxembourg",
    "mo": "Macau",
    "mg": "Madagascar",
    "mw": "Malawi",
    "my": "Malaysia",
    "mv": "Maldives",
    "ml": "Mali",
    "mt": "Malta",
    "mh": "Marshall Islands",
    "mr": "Mauritania",
    "mu": "Mauritius",
    "mx": "Mexico",
    "fm": "Micronesia",
    "md": "Moldova",
    "mc": "Monaco",
    "mn": "Mongolia",
    "me": "Montenegro",
    "ma": "Morocco",
    "mz": "Mozambique",
    "mm": "Myanmar",
    "na": "Namibia",
    "nr": "Nauru",
    "np": "Nepal",
    "nl": "Netherlands",
    "nz": "New Zealand",
    "ni": "Nicaragua",
    "ne": "Niger",
    "ng": "Nigeria",
    "mk": "North Macedonia",
    "no": "Norway",
    "om": "Oman",
    "pk": "Pakistan",
    "pw": "Palau",
    "ps": "Palestine",
    "pa": "Panama",
    "pg": "Papua New Guinea",
    "py": "Paraguay",
    "pe": "Peru",
    "ph": "Philippines",
    "pl": "Poland",
    "pt": "Portugal",
    "qa": "Qatar",
    "ro": "Romania",
    "ru": "Russia",
    "rw": "Rwanda",
    "kn": "Saint Kitts and Nevis",
    "lc": "Saint Lucia",
    "vc": "Saint Vincent and the Grenadines",
    "ws": "Samoa",
    "sm": "San Marino",
    "st": "Sao Tome and Principe",
    "sa": "Saudi Arabia",
    "sn": "Senegal",
    "rs": "Serbia",
    "sc": "Seychelles",
    "sl": "Sierra Leone",
    "sg": "Singapore",
    "sk": "Slovakia",
    "si": "Slovenia",
    "sb": "Solomon Islands",
    "so": "Somalia",
    "za": "South Africa",
    "ss": "South Sudan",
    "es": "Spain",
    "lk": "Sri Lanka",
    "sd": "Sudan",
    "sr": "Suriname",
    "se": "Sweden",
    "ch": "Switzerland",
    "sy": "Syria",
    "tw": "Taiwan",
    "tj": "Tajikistan",
    "tz": "Tanzania",
    "th": "Thailand",
    "tl": "Timor-Leste",
    "tg": "Togo",
    "to": "Tonga",
    "tt": "Trinidad and Tobago",
    "tn": "Tunisia",
    "tr": "Turkey",
    "tm": "Turkmenistan",
    "tv": "Tuvalu",
    "ug": "Uganda",
    "ua": "Ukraine",
    "ae": "United Arab Emirates",
    "gb": "United Kingdom",
    "us": "United States",
    "uy": "Uruguay",
    "uz": "Uzbekistan",
    "vu": "Vanuatu",
    "va": "Vatican City",
    "ve": "Venezuela",
    "vn": "Vietnam",
    "ye": "Yemen",
    "zm": "Zambia",
    "zw": "Zimbabwe",
}

# Lowercase country names, for "is this already a country name?" checks
COUNTRY_NAMES_LOWER: frozenset[str] = frozenset(
    name.lower() for name in COUNTRY_ID_TO_NAME.values()
)


# =============================================================================
# Entity types  (applicant_type_MC -> ownerSelection.entityType)
# Values outside this table fall back to entityTypeOther (free form).
# =============================================================================

ENTITY_TYPE_NAME_TO_ID: dict[str, str] = {
    "individual":                        "individual",
    "joint individuals":                 "joint_individuals",
    "sole proprietorship":               "sole_proprietorship",
    "corporation":                       "corporation",
    "c corporation":                     "corporation",
    "s corporation":                     "corporation",
    "nonprofit corporation":             "nonprofit_corporation",
    "non-profit corporation":            "nonprofit_corporation",
    "limited liability company":         "limited_liability_company",
    "llc":                               "limited_liability_company",
    "partnership":                       "partnership",
    "general partnership":               "partnership",
    "limited partnership":               "limited_partnership",
    "limited liability partnership":     "limited_liability_partnership",
    "joint venture":                     "joint_venture",
    "trust":                             "trust",
    "estate":                            "estate",
}


# =============================================================================
# Signatory titles
# =============================================================================

SIGNATORY_TITLE_TO_POSITION_MAP: dict[str, str] = {
    "attorney of record": "Attorney of Record",
    "ceo":                "CEO",
    "cfo":                "CFO",
    "coo":                "COO",
    "co-owner":           "Co-Owner",
    "director":           "Director",
    "founder":            "Founder",
    "manager":            "Manager",
    "managing partner":   "Managing Partner",
    "member":             "Member",
    "officer":            "Officer",
    "owner":              "Owner",
    "partner":            "Partner",
    "president":          "President",
    "principal":          "Principal",
    "secretary":          "Secretary",
    "treasurer":          "Treasurer",
    "vice president":     "Vice President",
    "other":              "Other",
}


# =============================================================================
# Mark format
# =============================================================================

TYPE_OF_MARK_TO_PROTECT_MAP: dict[str, str] = {
    "typed (standard characters)":                     "standard_character",
    "design (special form - stylized and/or design)":  "design_mark",
}


# =============================================================================
# Yes / No and usage intent
# =============================================================================

YES_OR_NO_MAP: dict[str, str] = {
    "yes": "yes",
    "no":  "no",
}

USING_MARK_PHRASE = "Yes, I'm using this mark."
INTEND_TO_USE_PHRASE = "No, but I intend to use it in the future."

INTEND_TO_USE_MARK_MAP: dict[str, str] = {
    "customer stated that they are currently using the trademark.":       USING_MARK_PHRASE,
    "customer stated that they intent to use the trademark in the future.": INTEND_TO_USE_PHRASE,
    "yes": USING_MARK_PHRASE,
    "no":  INTEND_TO_USE_PHRASE,
}

# Client-facing usage phrase -> goodsAndServices.filingBasis
FILING_BASIS_BY_PHRASE: dict[str, str] = {
    USING_MARK_PHRASE:    "yes",   # in use  (Section 1(a))
    INTEND_TO_USE_PHRASE: "no",    # intent to use  (Section 1(b))
}


# =============================================================================
# Section 2(f) claim nature
# =============================================================================

CLAIM_NATURE_MAP: dict[str, ClaimNature] = {
    "whole":   ClaimNature.WHOLE,
    "in part": ClaimNature.IN_PART,
}


# =============================================================================
# Alternate name (DBA / TA / AKA) classification
#
# Ordered rule table: the first token found (case-insensitive substring) in
# DBA_AKA_TA_FKA_Choice_MC wins.  Order is the priority.
# =============================================================================

ALTERNATE_NAME_RULES: List[Tuple[str, str]] = [
    ("dba", "DBA"),   # doing business as
    ("ta",  "TA"),    # trading as
    ("aka", "AKA"),   # also known as
]
