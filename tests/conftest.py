"""Shared Proofer answer sets."""

import pytest


def field(name, value):
    return {"fieldName": name, "fieldValue": value}


def group(group_name, name, value, index):
    return {"groupName": group_name, "fieldName": name, "fieldValue": value, "groupIndex": index}


@pytest.fixture
def empty_proofer_data():
    return {"fieldAnswers": [], "groupAnswers": []}


@pytest.fixture
def individual_proofer_data():
    return {
        "fieldAnswers": [
            field("mark", "Acme"),
            field("applicant_type_MC", "Individual"),
            field("First_Name_of_Petitioner", "Jane"),
            field("Last_Name_of_Petitioner", "Doe"),
        ],
        "groupAnswers": [],
    }


@pytest.fixture
def juristic_proofer_data():
    return {
        "fieldAnswers": [
            field("mark", "Bright Widgets"),
            field("type_of_mark_to_protect_MC", "Typed (Standard Characters)"),
            field("applicant_type_MC", "Limited Liability Company"),
            field("Name_of_Applicant", "  Bright Widgets LLC  "),
            field("State", "California"),
            field("street_address", "1 Main St"),
            field("City", "Glendale"),
            field("zip_code", "91203"),
            field("e_mail_address", "legal@brightwidgets.example"),
            field("petitioner_s_telephone_number", "(555) 123-4567"),
            field("DBA_AKA_TA_FKA_Choice_MC", "DBA (Doing Business As)"),
            field("DBA_AKA_TA_FKA_Value_ST", "Bright"),
            field("attorney_full_name_ST", "Alex Q Counsel"),
            field("gs_itu_G_S_filing_basis_internal_note_LT",
                  "Customer stated that they are currently using the trademark."),
            field("AS_disclaimer_ST", "WIDGETS"),
        ],
        "groupAnswers": [
            group("signatory_info_GRP", "signatory_info_GRP_signature_ST_1", "Jane Doe", 1),
            group("signatory_info_GRP", "signatory_info_GRP_title_MC_1", "ceo", 1),
        ],
    }


@pytest.fixture
def joint_proofer_data():
    answers = []
    for number, (first, last, state) in enumerate(
        [("Jane", "Doe", "NY"), ("John", "Roe", "Ontario")], start=1
    ):
        answers += [
            group("joint_owner_info_GRP", f"joint_owner_info_GRP_first_name_ST_{number}", first, number),
            group("joint_owner_info_GRP", f"joint_owner_info_GRP_last_name_ST_{number}", last, number),
            group("joint_owner_info_GRP", f"joint_owner_info_GRP_state_ST_{number}", state, number),
            group("joint_owner_info_GRP", f"joint_owner_info_GRP_phone_ST_{number}", "5551234567", number),
        ]
    return {
        "fieldAnswers": [
            field("applicant_type_MC", "Joint Individuals"),
            field("DBA_AKA_TA_FKA_Choice_MC", "AKA"),
            field("DBA_AKA_TA_FKA_Value_ST", "The Does"),
        ],
        "groupAnswers": answers,
    }
