# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Common
    "common.unknown": "Unknown",
    "common.unspecified": "Not specified",
    "button.retry": "Retry",
    "button.choose_another_unit": "Choose another unit",

    # Error Messages - API
    "error.api.connection": "Connection error. Please check your internet connection.",
    "error.api.timeout": "Connection timeout. Please try again.",
    "error.api.unauthorized": "Unauthorized. Please login again.",
    "error.api.forbidden": "Access forbidden.",
    "error.api.server": "The service is temporarily unavailable. Please try again later.",
    "error.api.validation": "The submitted data was rejected. Please review the form.",

    # Field validation
    "validation.field.required": "{label} is required",
    "validation.field.must_select": "{label} must be selected",
    "validation.field.must_accept": "You must accept {label}",
    "validation.field.numeric": "Must be numeric",
    "validation.field.decimal": "Must be a valid number",
    "validation.field.password_short": "Password too short",
    "validation.field.past_date": "{label} cannot be in the past",
    "validation.list.owner_required": "At least one owner must be added",
    "validation.list.engine_required": "At least one engine must be added",
    "validation.list.sailor_required": "At least one sailor must be added",
    "validation.list.selection_required": "At least one commercial registration must be selected",
    "validation.multiselect.required": "{label} is required - please select at least one option",
    "validation.multiselect.max": "Maximum {max} selections allowed",

    # Step validation (submit time)
    "validation.step.required": "This field is required",
    "validation.step.email": "Invalid email address",
    "validation.step.phone": "Invalid phone number",
    "validation.step.numeric_only": "Must contain digits only",

    # Cross-field rules
    "rules.dimensions.width_exceeds_length": "Width cannot exceed length",
    "rules.dimensions.height_unusual": "Height seems unusually large for this vessel size",
    "rules.dimensions.decks_unusual": "Number of decks seems unusual for this vessel size",
    "rules.dates.manufacturer_year": "Manufacturer year must be between {min_year} and current year",
    "rules.dates.construction_range": "Construction end date must be after start date",
    "rules.dates.registration_after_construction": "Registration date must be after construction completion",
    "rules.weights.imo_required": "IMO number is required for vessels over {tonnage:g} gross tonnage. Please go back and enter IMO number.",
    "rules.weights.mmsi_required": "MMSI number is required for vessels over {tonnage:g} gross tonnage. Please go back and enter MMSI number.",
    "rules.weights.net_tonnage": "Net tonnage must be less than or equal to gross tonnage",
    "rules.weights.static_load": "Static load cannot exceed gross tonnage",
    "rules.weights.max_permitted_load": "Maximum permitted load must be greater than or equal to static load",
    "rules.documents.inspection_required": "Inspection documents are required for marine units {length:g} meters long or shorter",
    "rules.mortgage.bank_required": "Bank name is required when a mortgage value is entered",

    # Eligibility - reasons and suggestions
    "eligibility.not_owned.reason": "The marine unit is not registered in your name",
    "eligibility.not_owned.suggestion": "Please choose a marine unit that you own",
    "eligibility.already_mortgaged.reason": "The marine unit is already mortgaged to {bank}",
    "eligibility.already_mortgaged.suggestion": "You can submit a mortgage release request first",
    "eligibility.not_mortgaged.reason": "The marine unit is not mortgaged",
    "eligibility.not_mortgaged.suggestion": "This transaction is for releasing a mortgage only. Choose a mortgaged unit",
    "eligibility.temporary.reason": "The unit only holds a temporary registration certificate",
    "eligibility.temporary.suggestion": "A permanent registration certificate must be obtained first",
    "eligibility.suspended.reason": "Registration status: {status}",
    "eligibility.suspended.suggestion": "This transaction cannot be performed on a suspended or cancelled unit",
    "eligibility.violations.reason": "A marine unit with active violations cannot be mortgaged ({count} violations)",
    "eligibility.violations.suggestion": "Violations must be settled before submitting a mortgage request",
    "eligibility.detentions.reason": "A detained marine unit cannot be mortgaged ({count} detentions)",
    "eligibility.detentions.suggestion": "Detentions must be lifted before submitting a mortgage request",
    "eligibility.unapproved_bank.reason": "The current mortgage is not registered with an approved bank",
    "eligibility.unapproved_bank.suggestion": "Please contact the competent authorities to update the mortgage data",
    "eligibility.not_inspected.reason": "The marine unit has not been inspected",
    "eligibility.inspection_pending.reason": "The request is being processed",
    "eligibility.inspection_pending.suggestion": "Please wait until the inspection verification is complete",
    "eligibility.inspection_failed.reason": "The marine unit has not been inspected or the inspection was rejected",
    "eligibility.inspection_required.suggestion": "An inspection must be carried out before temporary registration",
    "eligibility.status.suspended": "Suspended",
    "eligibility.status.cancelled": "Cancelled",

    # Eligibility - step texts
    "eligibility.step.title": "Select marine unit",
    "eligibility.step.description": "Choose the marine unit to complete the transaction",
    "eligibility.mortgage.step.title": "Select the marine unit to mortgage",
    "eligibility.mortgage.step.description": "Choose the marine unit you want to mortgage",
    "eligibility.release.step.title": "Select the marine unit to release",
    "eligibility.release.step.description": "Choose the mortgaged marine unit you want to release",
    "eligibility.temporary.step.title": "Select the marine unit for temporary registration",
    "eligibility.temporary.step.description": "Choose the marine unit you want to register temporarily",

    # Eligibility - compliance screen
    "compliance.rejected.title": "Request rejected",
    "compliance.pending.title": "Request under processing",
    "compliance.suggested_solution": "Suggested solution",
    "compliance.reason": "Reason",
    "compliance.current_owner": "Current owner",
    "compliance.bank": "Mortgagee bank",
    "compliance.mortgage_end_date": "Mortgage end date",
    "compliance.registration_type": "Current registration type",
    "compliance.required": "Required",
    "compliance.status": "Status",
    "compliance.violations_count": "Number of violations",
    "compliance.detentions_count": "Number of detentions",
    "compliance.category.ownership": "Ownership",
    "compliance.category.mortgage": "Mortgage status",
    "compliance.category.registration_type": "Registration type",
    "compliance.category.registration_status": "Registration status",
    "compliance.category.violations": "Violations",
    "compliance.category.detentions": "Detentions",
    "compliance.category.inspection": "Inspection status",
    "compliance.category.rejection": "Rejection reason",
    "compliance.issue.not_owned": "The unit is not owned by you",
    "compliance.issue.not_owned.description": "This marine unit is not registered in your name in the official records",
    "compliance.issue.mortgaged": "The unit is already mortgaged",
    "compliance.issue.mortgaged.description": "This marine unit is currently mortgaged to {bank}",
    "compliance.issue.temporary": "Temporary registration only",
    "compliance.issue.temporary.description": "This marine unit holds a temporary registration certificate",
    "compliance.issue.status": "Registration {status}",
    "compliance.issue.status.description": "This marine unit is in {status} state",
    "compliance.issue.violations": "Active violations",
    "compliance.issue.violations.description": "This marine unit has {count} active violations",
    "compliance.issue.detentions": "Active detentions",
    "compliance.issue.detentions.description": "This marine unit is detained ({count} detentions)",
    "compliance.issue.not_inspected": "Unit not inspected",
    "compliance.issue.pending": "Request under processing",
    "compliance.issue.ineligible": "Unit not eligible",
    "compliance.value.temporary": "Temporary",
    "compliance.value.permanent": "Permanent registration",
    "compliance.mortgage.rejection": "A marine unit that is already mortgaged cannot be mortgaged. The current mortgage must be released first.",
    "compliance.mortgage.rejection.title": "Request rejected - unit mortgaged",
    "compliance.ownership.rejection": "You can only mortgage marine units you own. Please choose another unit.",
    "compliance.ownership.rejection.title": "Request rejected - ownership not proven",
    "compliance.temporary.rejection": "A marine unit with temporary registration cannot be mortgaged. Registration must be permanent.",
    "compliance.temporary.rejection.title": "Request rejected - temporary registration",
    "compliance.status.rejection": "A {status} marine unit cannot be mortgaged. The unit must be active.",
    "compliance.status.rejection.title": "Request rejected - unit {status}",
    "compliance.violations.rejection": "A marine unit with active violations cannot be mortgaged. Violations must be settled first.",
    "compliance.violations.rejection.title": "Request rejected - active violations",
    "compliance.detentions.rejection": "A detained marine unit cannot be mortgaged. The detention must be lifted first.",
    "compliance.detentions.rejection.title": "Request rejected - unit detained",

    # Eligibility - error dialogs
    "eligibility.error.not_mortgaged.title": "The marine unit is not mortgaged",
    "eligibility.error.not_mortgaged.message": "A unit that is not mortgaged cannot be released",
    "eligibility.error.ineligible.title": "The marine unit is not eligible",
    "eligibility.error.lookup_failed.title": "Unable to verify the marine unit",
    "eligibility.action.go_to_mortgage": "Go to mortgage certificate issuance",
}
