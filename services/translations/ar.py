# -*- coding: utf-8 -*-
"""Arabic translations."""

AR_TRANSLATIONS = {
    # Common
    "common.unknown": "غير معروف",
    "common.unspecified": "غير محدد",
    "button.retry": "إعادة المحاولة",
    "button.choose_another_unit": "اختيار وحدة أخرى",

    # Error Messages - API
    "error.api.connection": "خطأ في الاتصال. يرجى التحقق من اتصالك بالإنترنت.",
    "error.api.timeout": "انتهت مهلة الاتصال. يرجى المحاولة مرة أخرى.",
    "error.api.unauthorized": "غير مصرح. يرجى تسجيل الدخول مرة أخرى.",
    "error.api.forbidden": "الوصول مرفوض.",
    "error.api.server": "الخدمة غير متاحة مؤقتاً. يرجى المحاولة لاحقاً.",
    "error.api.validation": "تم رفض البيانات المرسلة. يرجى مراجعة النموذج.",

    # Field validation
    "validation.field.required": "{label} مطلوب",
    "validation.field.must_select": "يجب اختيار {label}",
    "validation.field.must_accept": "يجب الموافقة على {label}",
    "validation.field.numeric": "يجب أن يحتوي على أرقام فقط",
    "validation.field.decimal": "يجب إدخال رقم صحيح",
    "validation.field.password_short": "كلمة المرور قصيرة جداً",
    "validation.field.past_date": "لا يمكن أن يكون {label} في الماضي",
    "validation.list.owner_required": "يجب إضافة مالك واحد على الأقل",
    "validation.list.engine_required": "يجب إضافة محرك واحد على الأقل",
    "validation.list.sailor_required": "يجب إضافة بحار واحد على الأقل",
    "validation.list.selection_required": "يجب اختيار سجل تجاري واحد على الأقل",
    "validation.multiselect.required": "{label} مطلوب - يرجى اختيار خيار واحد على الأقل",
    "validation.multiselect.max": "الحد الأقصى {max} اختيارات",

    # Step validation (submit time)
    "validation.step.required": "هذا الحقل مطلوب",
    "validation.step.email": "البريد الإلكتروني غير صالح",
    "validation.step.phone": "رقم الهاتف غير صالح",
    "validation.step.numeric_only": "يجب أن يحتوي على أرقام فقط",

    # Cross-field rules
    "rules.dimensions.width_exceeds_length": "لا يمكن أن يتجاوز العرض الطول",
    "rules.dimensions.height_unusual": "الارتفاع كبير بشكل غير معتاد لحجم هذه الوحدة",
    "rules.dimensions.decks_unusual": "عدد الطوابق غير معتاد لحجم هذه الوحدة",
    "rules.dates.manufacturer_year": "يجب أن تكون سنة الصنع بين {min_year} والسنة الحالية",
    "rules.dates.construction_range": "يجب أن يكون تاريخ انتهاء البناء بعد تاريخ البدء",
    "rules.dates.registration_after_construction": "يجب أن يكون تاريخ التسجيل بعد اكتمال البناء",
    "rules.weights.imo_required": "رقم IMO مطلوب للوحدات التي تزيد حمولتها الإجمالية عن {tonnage:g}. يرجى الرجوع وإدخال رقم IMO.",
    "rules.weights.mmsi_required": "رقم MMSI مطلوب للوحدات التي تزيد حمولتها الإجمالية عن {tonnage:g}. يرجى الرجوع وإدخال رقم MMSI.",
    "rules.weights.net_tonnage": "يجب أن تكون الحمولة الصافية أقل من أو تساوي الحمولة الإجمالية",
    "rules.weights.static_load": "لا يمكن أن تتجاوز الحمولة الساكنة الحمولة الإجمالية",
    "rules.weights.max_permitted_load": "يجب أن تكون الحمولة القصوى المسموحة أكبر من أو تساوي الحمولة الساكنة",
    "rules.documents.inspection_required": "مستندات الفحص مطلوبة للوحدات البحرية التي يقل طولها عن أو يساوي {length:g} متر",
    "rules.mortgage.bank_required": "اسم البنك مطلوب عند إدخال قيمة الرهن",

    # Eligibility - reasons and suggestions
    "eligibility.not_owned.reason": "الوحدة البحرية غير مسجلة باسمك",
    "eligibility.not_owned.suggestion": "يرجى اختيار وحدة بحرية مملوكة لك",
    "eligibility.already_mortgaged.reason": "الوحدة البحرية مرهونة بالفعل لدى {bank}",
    "eligibility.already_mortgaged.suggestion": "يمكنك تقديم طلب فك الرهن أولاً",
    "eligibility.not_mortgaged.reason": "الوحدة البحرية غير مرهونة",
    "eligibility.not_mortgaged.suggestion": "هذه المعاملة لفك الرهن فقط. اختر وحدة مرهونة",
    "eligibility.temporary.reason": "الوحدة لديها شهادة تسجيل مؤقتة فقط",
    "eligibility.temporary.suggestion": "يجب الحصول على شهادة تسجيل دائمة أولاً",
    "eligibility.suspended.reason": "حالة التسجيل: {status}",
    "eligibility.suspended.suggestion": "لا يمكن إجراء هذه المعاملة على وحدة متوقفة أو ملغاة",
    "eligibility.violations.reason": "لا يمكن رهن وحدة بحرية لديها مخالفات نشطة ({count} مخالفة)",
    "eligibility.violations.suggestion": "يجب تسوية المخالفات أولاً قبل تقديم طلب الرهن",
    "eligibility.detentions.reason": "لا يمكن رهن وحدة بحرية محتجزة ({count} احتجاز)",
    "eligibility.detentions.suggestion": "يجب فك الاحتجاز أولاً قبل تقديم طلب الرهن",
    "eligibility.unapproved_bank.reason": "الرهن الحالي غير مسجل لدى بنك معتمد",
    "eligibility.unapproved_bank.suggestion": "يرجى التواصل مع الجهات المختصة لتحديث بيانات الرهن",
    "eligibility.not_inspected.reason": "الوحدة البحرية غير مفحوصة",
    "eligibility.inspection_pending.reason": "الطلب قيد المعالجة",
    "eligibility.inspection_pending.suggestion": "يرجى الانتظار حتى اكتمال عملية التحقق من الفحص",
    "eligibility.inspection_failed.reason": "الوحدة البحرية غير مفحوصة أو تم رفض الفحص",
    "eligibility.inspection_required.suggestion": "يجب إجراء الفحص أولاً قبل التسجيل المؤقت",
    "eligibility.status.suspended": "متوقف",
    "eligibility.status.cancelled": "ملغي",

    # Eligibility - step texts
    "eligibility.step.title": "اختيار الوحدة البحرية",
    "eligibility.step.description": "اختر الوحدة البحرية لإتمام المعاملة",
    "eligibility.mortgage.step.title": "اختيار الوحدة البحرية للرهن",
    "eligibility.mortgage.step.description": "اختر الوحدة البحرية التي ترغب في رهنها",
    "eligibility.release.step.title": "اختيار الوحدة البحرية لفك الرهن",
    "eligibility.release.step.description": "اختر الوحدة البحرية المرهونة التي ترغب في فك رهنها",
    "eligibility.temporary.step.title": "اختيار الوحدة البحرية للتسجيل المؤقت",
    "eligibility.temporary.step.description": "اختر الوحدة البحرية التي ترغب في تسجيلها مؤقتاً",

    # Eligibility - compliance screen
    "compliance.rejected.title": "تم رفض الطلب",
    "compliance.pending.title": "طلب قيد المعالجة",
    "compliance.suggested_solution": "الحل المقترح",
    "compliance.reason": "السبب",
    "compliance.current_owner": "المالك الحالي",
    "compliance.bank": "البنك المرتهن",
    "compliance.mortgage_end_date": "تاريخ انتهاء الرهن",
    "compliance.registration_type": "نوع التسجيل الحالي",
    "compliance.required": "المطلوب",
    "compliance.status": "الحالة",
    "compliance.violations_count": "عدد المخالفات",
    "compliance.detentions_count": "عدد الاحتجازات",
    "compliance.category.ownership": "الملكية",
    "compliance.category.mortgage": "حالة الرهن",
    "compliance.category.registration_type": "نوع التسجيل",
    "compliance.category.registration_status": "حالة التسجيل",
    "compliance.category.violations": "المخالفات",
    "compliance.category.detentions": "الاحتجازات",
    "compliance.category.inspection": "حالة الفحص",
    "compliance.category.rejection": "سبب الرفض",
    "compliance.issue.not_owned": "الوحدة غير مملوكة لك",
    "compliance.issue.not_owned.description": "هذه الوحدة البحرية غير مسجلة باسمك في السجلات الرسمية",
    "compliance.issue.mortgaged": "الوحدة مرهونة بالفعل",
    "compliance.issue.mortgaged.description": "هذه الوحدة البحرية مرهونة حالياً لدى {bank}",
    "compliance.issue.temporary": "تسجيل مؤقت فقط",
    "compliance.issue.temporary.description": "هذه الوحدة البحرية لديها شهادة تسجيل مؤقتة",
    "compliance.issue.status": "التسجيل {status}",
    "compliance.issue.status.description": "هذه الوحدة البحرية في حالة {status}",
    "compliance.issue.violations": "وجود مخالفات نشطة",
    "compliance.issue.violations.description": "هذه الوحدة البحرية لديها {count} مخالفة نشطة",
    "compliance.issue.detentions": "وجود احتجازات نشطة",
    "compliance.issue.detentions.description": "هذه الوحدة البحرية محتجزة ({count} احتجاز)",
    "compliance.issue.not_inspected": "الوحدة غير مفحوصة",
    "compliance.issue.pending": "الطلب قيد المعالجة",
    "compliance.issue.ineligible": "الوحدة غير مؤهلة",
    "compliance.value.temporary": "مؤقت",
    "compliance.value.permanent": "تسجيل دائم",
    "compliance.mortgage.rejection": "لا يمكن رهن وحدة بحرية مرهونة بالفعل. يجب فك الرهن الحالي أولاً.",
    "compliance.mortgage.rejection.title": "تم رفض الطلب - الوحدة مرهونة",
    "compliance.ownership.rejection": "يمكنك رهن الوحدات البحرية المملوكة لك فقط. يرجى اختيار وحدة أخرى.",
    "compliance.ownership.rejection.title": "تم رفض الطلب - ملكية غير مثبتة",
    "compliance.temporary.rejection": "لا يمكن رهن وحدة بحرية ذات تسجيل مؤقت. يجب أن يكون التسجيل دائماً.",
    "compliance.temporary.rejection.title": "تم رفض الطلب - تسجيل مؤقت",
    "compliance.status.rejection": "لا يمكن رهن وحدة بحرية {status}. يجب أن تكون الوحدة نشطة.",
    "compliance.status.rejection.title": "تم رفض الطلب - وحدة {status}",
    "compliance.violations.rejection": "لا يمكن رهن وحدة بحرية لديها مخالفات نشطة. يجب تسوية المخالفات أولاً.",
    "compliance.violations.rejection.title": "تم رفض الطلب - مخالفات نشطة",
    "compliance.detentions.rejection": "لا يمكن رهن وحدة بحرية محتجزة. يجب فك الاحتجاز أولاً.",
    "compliance.detentions.rejection.title": "تم رفض الطلب - وحدة محتجزة",

    # Eligibility - error dialogs
    "eligibility.error.not_mortgaged.title": "الوحدة البحرية غير مرهونة",
    "eligibility.error.not_mortgaged.message": "لا يمكن فك رهن وحدة غير مرهونة",
    "eligibility.error.ineligible.title": "الوحدة البحرية غير مؤهلة",
    "eligibility.error.lookup_failed.title": "تعذر التحقق من الوحدة البحرية",
    "eligibility.action.go_to_mortgage": "الانتقال إلى إصدار شهادة رهن",
}
