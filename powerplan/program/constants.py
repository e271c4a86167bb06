"""Fixed labels, templates and metadata tables.

User-facing text is French, matching the rest of the application.
Week labels and focus strings are keyed by scheme-relative table week.
"""

from powerplan.program.enums import CycleType, Lift

LIFT_NAMES: dict[Lift, str] = {
    Lift.SQUAT: "Squat",
    Lift.BENCH: "Bench Press",
    Lift.DEADLIFT: "Deadlift",
}

LIFT_SHORT_NAMES: dict[Lift, str] = {
    Lift.SQUAT: "Squat",
    Lift.BENCH: "Bench",
    Lift.DEADLIFT: "Deadlift",
}

SCHEME_LABELS: dict[CycleType, str] = {
    CycleType.LINEAR: "Linéaire",
    CycleType.FIVE_THREE_ONE: "5/3/1",
    CycleType.BLOCK: "Block",
    CycleType.HYPERTROPHY: "Hypertrophie",
}

WEEK_LABELS: dict[CycleType, dict[int, str]] = {
    CycleType.LINEAR: {
        1: "Prise en main",
        2: "Volume",
        3: "Force",
        4: "Force lourde",
        5: "Pré-test",
        6: "Test",
    },
    CycleType.FIVE_THREE_ONE: {
        1: "5s (Volume)",
        2: "3s (Force)",
        3: "5/3/1 (Intensité)",
        4: "Récupération",
    },
    CycleType.BLOCK: {
        1: "Accumulation 1",
        2: "Accumulation 2",
        3: "Accumulation 3",
        4: "Intensification 1",
        5: "Intensification 2",
        6: "Intensification 3",
        7: "Peaking",
        8: "Décharge",
    },
    CycleType.HYPERTROPHY: {
        1: "Volume 12s",
        2: "Volume 10s",
        3: "Volume 8s",
        4: "Allègement",
    },
}

WEEK_FOCUS: dict[CycleType, dict[int, str]] = {
    CycleType.LINEAR: {
        1: "3x5 @ 72.5% - Prise en main des charges, technique propre.",
        2: "3x5 @ 77.5% - Même volume, charge en hausse.",
        3: "4x3 @ 82.5% - Moins de reps, plus de charge.",
        4: "3x3 @ 87.5% - Force, garder 1-2 reps en réserve.",
        5: "3x2 @ 92.5% - Lourd. Préparation au test.",
        6: "Test @ 102.5% - AMRAP sur le dernier set. Nouveau record.",
    },
    CycleType.FIVE_THREE_ONE: {
        1: "3x5 @ 65-85% TM - AMRAP sur le dernier set. Construire le volume.",
        2: "3x3 @ 70-90% TM - AMRAP sur le dernier set. Force maximale.",
        3: "5/3/1 @ 75-95% TM - AMRAP sur le dernier set. Semaine la plus intense.",
        4: "Récupération @ 40-60% TM. Préparer le prochain cycle.",
    },
    CycleType.BLOCK: {
        1: "Accumulation - 4x8 @ 65%. Construire le volume.",
        2: "Accumulation - 4x8 @ 67.5%. Volume en hausse.",
        3: "Accumulation - 4x8 @ 70%. Fin du bloc de volume.",
        4: "Intensification - 4x5 @ 77.5%. Transition vers la force.",
        5: "Intensification - 4x4 @ 82.5%. Force.",
        6: "Intensification - 4x3 @ 87.5%. Charges lourdes.",
        7: "Peaking - Single @ 100% en AMRAP. Test du max.",
        8: "Décharge @ 45-50%. Récupération avant le prochain bloc.",
    },
    CycleType.HYPERTROPHY: {
        1: "4x12 @ 60% - Volume d'hypertrophie.",
        2: "4x10 @ 65% - Volume d'hypertrophie.",
        3: "4x8 @ 70% - AMRAP sur le dernier set.",
        4: "3x10 @ 55% - Semaine allégée.",
    },
}

DELOAD_LABEL = "Déload 😴"
DELOAD_FOCUS = "😴 Déload - Séries légères uniquement. Récupération active pour le prochain cycle."

SCHEME_DESCRIPTIONS: dict[CycleType, str] = {
    CycleType.LINEAR: (
        "Progression linéaire : l'intensité monte chaque semaine de 72.5% jusqu'à un test à 102.5% du 1RM."
    ),
    CycleType.FIVE_THREE_ONE: (
        "Programme 5/3/1 de Jim Wendler : vagues de 5, 3 puis 1 rep avec AMRAP sur le dernier set, "
        "suivies d'une semaine de récupération."
    ),
    CycleType.BLOCK: "Périodisation par blocs : accumulation, intensification, peaking puis décharge.",
    CycleType.HYPERTROPHY: "Bloc d'hypertrophie : séries longues à intensité modérée pour construire du muscle.",
}

SCHEME_REASONS: dict[CycleType, str] = {
    CycleType.LINEAR: "Progression linéaire adaptée à ton niveau : chaque semaine un peu plus lourd.",
    CycleType.FIVE_THREE_ONE: "5/3/1 : des vagues d'intensité qui laissent progresser un niveau intermédiaire.",
    CycleType.BLOCK: "Périodisation par blocs : un niveau avancé a besoin de phases ciblées pour progresser.",
    CycleType.HYPERTROPHY: "Bloc d'hypertrophie choisi manuellement pour construire du muscle.",
}

AMRAP_REASON = "AMRAP sur les sets clés - ne va pas à l'échec, garde 1-2 reps en réserve."
ACCESSORY_REASON = "Accessoires (outil) en 3x8 @ RPE 7 pour renforcer les points faibles."

# kg gained per lift over one completed cycle (metadata only)
EXPECTED_PROGRESS: dict[CycleType, dict[Lift, float]] = {
    CycleType.LINEAR: {Lift.SQUAT: 10, Lift.BENCH: 5, Lift.DEADLIFT: 10},
    CycleType.FIVE_THREE_ONE: {Lift.SQUAT: 5, Lift.BENCH: 2.5, Lift.DEADLIFT: 5},
    CycleType.BLOCK: {Lift.SQUAT: 7.5, Lift.BENCH: 2.5, Lift.DEADLIFT: 7.5},
    CycleType.HYPERTROPHY: {Lift.SQUAT: 2.5, Lift.BENCH: 2.5, Lift.DEADLIFT: 2.5},
}

# Accessory structure: (sets, reps, rpe)
ACCESSORY_SETS_NORMAL = (3, 8, 7.0)
ACCESSORY_SETS_DELOAD = (2, 10, 6.0)
ACCESSORY_DELOAD_NOTE = "2x10-12 @ RPE 6 - Charge légère"
ACCESSORY_NOTE = "3x8 @ RPE 7"
ACCESSORIES_BASE_DAY = 2
ACCESSORIES_EXTRA_DAY = 1

# Extra days and deload weeks
MEDIUM_PERCENTAGE_BOOST = 5
MEDIUM_PERCENTAGE_CAP = 80
DELOAD_LIGHT_REDUCTION = 10
DELOAD_PERCENTAGE_FLOOR = 40

DELOAD_SUMMARY = "Semaine légère - Récupération"
