# Disease order (index = signature hash mod 3)
DISEASE_NAMES = ['Dengue', 'Malaria', 'Leptospirosis']

# Clinical and laboratory variables (feature name, unit placeholder, English label)
MEDICAL_VARIABLES = [
    ('Edad', 'Años', 'Age'),
    ('Temperatura', '°C', 'Temperature'),
    ('Plaquetas', 'x10³/μL', 'Platelets'),
    ('Leucocitos', 'x10³/μL', 'Leukocytes'),
    ('Hemoglobina', 'g/dL', 'Hemoglobin'),
    ('Hematocrito', '%', 'Hematocrit'),
    ('ALT (TGP)', 'U/L', 'ALT'),
    ('AST (TGO)', 'U/L', 'AST'),
    ('Bilirrubina Total', 'mg/dL', 'Total bilirubin'),
    ('Creatinina', 'mg/dL', 'Creatinine'),
]

# Variables shown on a fresh form
DEFAULT_VARIABLE_COUNT = 5

# Binary symptoms (feature name, English label), serialized as "0"/"1"
SYMPTOMS = [
    ('Fiebre', 'Fever'),
    ('Cefalea', 'Headache'),
    ('Mialgia', 'Myalgia'),
    ('Artralgia', 'Arthralgia'),
    ('Escalofrios', 'Chills'),
    ('Ictericia', 'Jaundice'),
    ('Erupcion', 'Rash'),
    ('Sangrado', 'Bleeding'),
]

# Occupations, one-hot encoded (feature name, English label)
OCCUPATIONS = [
    ('Agricultor', 'Farmer'),
    ('Ganadero', 'Cattle rancher'),
    ('Pescador', 'Fisher'),
    ('Minero', 'Miner'),
    ('Construccion', 'Construction worker'),
    ('Comerciante', 'Trader'),
    ('Estudiante', 'Student'),
    ('Hogar', 'Homemaker'),
]

# Model variants shown in the selector
MODEL_DESCRIPTIONS = {
    'RNA': ('Artificial Neural Network (RNA)', 'Deep learning - higher accuracy on complex patterns'),
    'RLO': ('Logistic Regression (RLO)', 'Linear classification - fast and interpretable'),
}

# Simulated latency in seconds
TRAINING_DELAY = 3.0
PREDICTION_DELAY = 1.5
BATCH_DELAY = 2.5

# Reported after a simulated training run (accuracy in %, F1 in [0, 1])
TRAINING_METRICS = {
    'RNA': {'accuracy': 88.9, 'f1_score': 0.887},
    'RLO': {'accuracy': 82.7, 'f1_score': 0.824},
}

# Balanced (SMOTE) confusion matrix shown by the batch panel.
# Rows = actual disease, columns = predicted disease, in DISEASE_NAMES order.
BATCH_CONFUSION_MATRIX = [
    [25, 3, 2],
    [3, 24, 3],
    [2, 3, 25],
]

# Factors applied to the batch metrics; RLO reports slightly lower values than RNA
BATCH_METRIC_SCALING = {
    'RNA': {'accuracy': 1.0, 'precision': 1.0, 'recall': 1.0, 'f1_score': 1.0},
    'RLO': {'accuracy': 0.93, 'precision': 0.92, 'recall': 0.94, 'f1_score': 0.93},
}

# Dataset uploads (content is never parsed)
ACCEPTED_EXTENSIONS = ('.csv', '.xlsx')
ACCEPTED_MIME_TYPES = (
    'text/csv',
    'application/vnd.ms-excel',
    'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
)

DATASET_DESCRIPTION = 'Tropical diseases - endemic region of the Colombian Caribbean'
