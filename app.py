"""
Streamlit Web Application for Tropical Differential Diagnosis
Dengue vs Malaria vs Leptospirosis (simulated models)
"""

import logging

import pandas as pd
import streamlit as st

import config
import forms
import metrics
from model import ModelVariant, Occupation
from session import DiagnosisSession, ModelNotTrainedError


logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# ============================================================
# PAGE CONFIG
# ============================================================

st.set_page_config(
    page_title="Tropical Differential Diagnosis",
    page_icon="🦟",
    layout="wide",
    initial_sidebar_state="expanded"
)


# ============================================================
# SESSION STATE
# ============================================================

if 'diagnosis_session' not in st.session_state:
    st.session_state['diagnosis_session'] = DiagnosisSession()
    st.session_state['prediction'] = None
    st.session_state['batch_report'] = None

session = st.session_state['diagnosis_session']


# ============================================================
# TITLE AND DESCRIPTION
# ============================================================

st.title("🦟 Tropical Differential Diagnosis")

col1, col2 = st.columns([3, 1])
with col1:
    st.markdown("""
    **Differential diagnosis system - Colombian Caribbean region**
    - Dengue, Malaria and Leptospirosis
    - Clinical, sociodemographic and laboratory variables
    - Two models: Neural Network (RNA) and Logistic Regression (RLO)
    """)
with col2:
    if session.is_trained:
        st.success("🟢 Model active")
    else:
        st.warning("⚪ Not trained")


# ============================================================
# SIDEBAR - MODEL SELECTION & TRAINING
# ============================================================

with st.sidebar:
    st.header("🧠 Select ML Model")
    st.caption("Choose the algorithm for the differential diagnosis")

    variants = list(ModelVariant)
    variant = st.radio(
        "Model",
        variants,
        index=variants.index(session.variant),
        format_func=lambda v: v.title,
        captions=[v.description for v in variants],
    )
    session.select_variant(variant)

    st.markdown("---")

    st.header("🗄️ Train Model")
    st.info("Upload the dataset with sociodemographic, clinical and laboratory variables "
            "of patients with dengue, malaria or leptospirosis.")

    training_file = st.file_uploader(
        "Training dataset",
        type=['csv', 'xlsx'],
        key='training_file',
        help="CSV or XLSX with clinical data"
    )
    if training_file is not None:
        try:
            forms.require_supported_upload(training_file.name, training_file.type)
        except ValueError as e:
            st.error(f"❌ {str(e)}")
            training_file = None

    if st.button(f"▶️ Train Model {session.variant.value}", type="primary",
                 disabled=training_file is None, use_container_width=True):
        try:
            with st.spinner(f"Training model {session.variant.value}..."):
                session.train(training_file.name)
            st.toast(f"Model {session.variant.value} trained with {training_file.name}")
            st.rerun()
        except ValueError as e:
            st.error(f"❌ {str(e)}")

    if session.is_trained:
        trained = session.training_metrics
        st.markdown("---")
        st.header("📊 Model Metrics")
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Accuracy", f"{trained.accuracy:.1f}%")
        with col2:
            st.metric("F1-Score", f"{trained.f1_score:.3f}")
        st.metric("Training Time", f"{trained.training_time:.2f}s")
        st.caption(f"Trained: {trained.variant.value} on {session.training_file}")

    st.markdown("---")
    st.caption("Built with Streamlit | Simulated models")


# ============================================================
# MAIN INTERFACE - TABS
# ============================================================

tab1, tab2, tab3, tab4 = st.tabs(["🩺 Individual Diagnosis", "📁 Batch Analysis", "📊 Model Info", "ℹ️ About"])


# ============================================================
# TAB 1: INDIVIDUAL DIAGNOSIS
# ============================================================

with tab1:
    st.header("🏥 Individual Differential Diagnosis")
    st.markdown("Enter the patient's laboratory values and clinical data to obtain a differential "
                "diagnosis between Dengue, Malaria and Leptospirosis.")

    labels = {name: f"{label} ({unit})" for name, unit, label in config.MEDICAL_VARIABLES}
    selected = st.multiselect(
        "Clinical and laboratory variables",
        [name for name, _, _ in config.MEDICAL_VARIABLES],
        default=forms.default_variables(),
        format_func=lambda name: labels[name],
    )

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("🧪 Laboratory")
        lab_values = {}
        for name in selected:
            lab_values[name] = st.text_input(labels[name], key=f"lab_{name}", placeholder="0.00")

    with col2:
        st.subheader("🤒 Symptoms")
        symptoms = {name: st.checkbox(label, key=f"sym_{name}") for name, label in config.SYMPTOMS}

        st.subheader("👷 Occupation")
        occupation = st.selectbox("Occupation", list(Occupation), format_func=lambda o: o.label)

    st.divider()

    if st.button("✨ Run Diagnosis", type="primary", use_container_width=True):
        missing = forms.missing_fields(lab_values)
        invalid = forms.non_numeric_fields(lab_values)
        if not selected:
            st.warning("⚠️ Select at least one clinical variable")
        elif missing:
            st.warning(f"⚠️ Incomplete fields: {', '.join(missing)}")
        elif invalid:
            st.warning(f"⚠️ Non-numeric values: {', '.join(invalid)}")
        else:
            features = forms.assemble_features(lab_values, symptoms, occupation)
            try:
                with st.spinner("Analyzing..."):
                    result, elapsed = session.diagnose(features)
                st.session_state['prediction'] = (result, elapsed, session.variant)
                st.toast(f"Diagnosis completed: {result.disease.value}")
            except ModelNotTrainedError as e:
                st.error(f"❌ Model not trained. {str(e)}")

    if st.session_state['prediction'] is not None:
        result, elapsed, used_variant = st.session_state['prediction']

        st.subheader("✨ Differential Diagnosis Result")
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Predicted Diagnosis", result.disease.value)
        with col2:
            st.metric("Confidence", f"{result.confidence * 100:.1f}%")
        with col3:
            st.metric("Processing Time", f"{elapsed:.3f}s")
        st.caption(f"Model: {used_variant.value}")

        rows = forms.probability_rows(result)
        for row in rows:
            col_disease, col_prob = st.columns([3, 1])
            with col_disease:
                st.markdown(f"**{row['Disease']}**")
            with col_prob:
                st.markdown(f"`{row['Percentage']}`")
            st.progress(row['Probability'])

        st.bar_chart(pd.DataFrame(rows).set_index('Disease')['Probability'])


# ============================================================
# TAB 2: BATCH ANALYSIS
# ============================================================

with tab2:
    st.header("📁 Batch Patient Analysis")
    st.markdown("Upload a CSV or XLSX file with clinical data of multiple patients to run differential "
                "diagnoses in batch and obtain model performance metrics.")

    batch_file = st.file_uploader(
        "Clinical data file",
        type=['csv', 'xlsx'],
        key='batch_file',
        help="CSV or XLSX with one patient per row"
    )
    if batch_file is not None:
        try:
            forms.require_supported_upload(batch_file.name, batch_file.type)
        except ValueError as e:
            st.error(f"❌ {str(e)}")
            batch_file = None

    if st.button("🚀 Analyze Patient Batch", type="primary",
                 disabled=batch_file is None, use_container_width=True):
        try:
            with st.spinner(f"Processing {batch_file.name}..."):
                st.session_state['batch_report'] = session.run_batch(batch_file.name)
            report = st.session_state['batch_report']
            st.toast(f"{report.metrics.total_samples} patients processed")
        except ModelNotTrainedError as e:
            st.error(f"❌ Model not trained. {str(e)}")
        except ValueError as e:
            st.error(f"❌ {str(e)}")

    report = st.session_state['batch_report']
    if report is not None:
        m = report.metrics

        st.subheader("📊 Analysis Results")
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Accuracy", f"{m.accuracy * 100:.2f}%", help="Overall model accuracy")
        with col2:
            st.metric("Precision", f"{m.precision * 100:.2f}%", help="Exactness of positive predictions")
        with col3:
            st.metric("Recall", f"{m.recall * 100:.2f}%", help="Model sensitivity")
        with col4:
            st.metric("F1-Score", f"{m.f1_score:.3f}", help="Harmonic mean of precision and recall")

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Patients Analyzed", m.total_samples)
        with col2:
            st.metric("Processing Time", f"{m.prediction_time:.2f}s")
        with col3:
            speed = m.throughput
            st.metric("Analysis Speed", f"{speed:.1f} pat/s" if speed is not None else "n/a")

        st.subheader("🔢 Confusion Matrix")
        st.caption("Comparison between actual and predicted diagnoses. The main diagonal holds "
                   "correct diagnoses; off-diagonal values are confusions between diseases.")
        st.dataframe(metrics.confusion_matrix_frame(report), use_container_width=True)
        with st.expander("Share of total (%)"):
            st.dataframe(metrics.confusion_share_frame(report), use_container_width=True)

        st.download_button(
            label="📥 Export CSV",
            data=metrics.export_csv(report),
            file_name=f"batch_results_{pd.Timestamp.now().strftime('%Y%m%d_%H%M%S')}.csv",
            mime="text/csv",
            use_container_width=True
        )


# ============================================================
# TAB 3: MODEL INFORMATION
# ============================================================

with tab3:
    st.header("📊 Model Information")

    col1, col2 = st.columns(2)
    for col, v in zip((col1, col2), ModelVariant):
        reported = v.training_metrics
        with col:
            st.subheader(v.title)
            st.write(v.description)
            st.metric("Reported Accuracy", f"{reported['accuracy']:.1f}%")
            st.metric("Reported F1-Score", f"{reported['f1_score']:.3f}")

    st.subheader("🧮 How predictions are produced")
    st.write("""
    The demo predictor is deterministic: the entered variables are joined in form order
    into a signature, the signature is hashed and the hash selects the disease and its
    confidence. The same variables always give the same diagnosis. Value formatting
    matters: `37` and `37.00` are different inputs.
    """)

    st.subheader("⚠️ Limitations")
    st.warning("""
    1. **Simulated models**: no statistical model is fitted to the uploaded data
    2. **Batch metrics**: the confusion matrix is a fixed balanced (SMOTE) example
    3. **Order sensitive**: reordering or reformatting variables changes the result
    4. **Not Medical Advice**: For demonstration only, not diagnostic
    """)


# ============================================================
# TAB 4: ABOUT
# ============================================================

with tab4:
    st.header("ℹ️ About This System")

    st.subheader("🎯 Purpose")
    st.write("""
    Demonstration front-end for the differential diagnosis of three endemic tropical
    diseases (Dengue, Malaria, Leptospirosis) from clinical and laboratory variables.
    """)

    st.subheader("📊 Dataset")
    st.write(f"- **Source**: {config.DATASET_DESCRIPTION}")

    st.subheader("⚕️ Medical Disclaimer")
    st.error("""
    **IMPORTANT**: This tool is for educational and demonstration purposes only.

    - NOT a substitute for professional medical diagnosis
    - Results are simulated, not model estimates
    - Always consult qualified healthcare professionals
    """)


# ============================================================
# FOOTER
# ============================================================

st.markdown("---")
st.markdown("""
<div style='text-align: center; color: #888; font-size: 0.9em;'>
    <p>🦟 <b>Tropical Differential Diagnosis</b> | Dengue · Malaria · Leptospirosis</p>
    <p>Built with Streamlit</p>
</div>
""", unsafe_allow_html=True)
