"""
검사항목 별칭/단위 참조 데이터 (reference/lab_items)
-----------------------------------------------------
- 일본어 검사결과지/차트 요약에서 쓰이는 검사항목 표기를 canonical 항목으로 묶는 수기 큐레이션 테이블입니다.
- 전각/반각, 그리스 문자, 로마자 표기, 괄호형 등 변형은 런타임 case-folding 대신 별칭으로 직접 등록합니다.
- 카테고리 순서는 모호한 조각 매칭 시 우선순위를 결정하므로 순서를 바꾸지 마세요.
  (proteins → renal → hepatic → ... → blood_gas → urinalysis)

새 항목은 이 파일에 직접 추가합니다. 서로 다른 항목이 같은 별칭을 공유하면
lab_dictionary.build_lab_dictionary() 가 DictionaryIntegrityError 로 즉시 실패합니다.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

LabItemCategory = Tuple[str, Dict[str, List[str]]]

LAB_ITEM_CATEGORIES: List[LabItemCategory] = [
    ("proteins", {
        "TP": ["TP", "総蛋白", "総タンパク"],
        "Alb": ["Alb", "ALB", "アルブミン", "ｱﾙﾌﾞﾐﾝ"],
        "A/G": ["A/G", "A/G比", "AG比"],
    }),
    ("renal", {
        "BUN": ["BUN", "UN", "尿素窒素"],
        "Cr": ["Cr", "CRE", "クレアチニン", "ｸﾚｱﾁﾆﾝ"],
        "eGFR": ["eGFR", "EGFR", "推算GFR"],
        "Ccr": ["Ccr", "CCR", "推算Ccr"],
        "UA": ["UA", "尿酸"],
    }),
    ("hepatic", {
        "AST": ["AST", "GOT"],
        "ALT": ["ALT", "GPT"],
        "γ-GTP": ["γ-GTP", "GGT", "γGTP", "r-GTP", "ガンマGTP"],
        "ALP": ["ALP", "アルカリフォスファターゼ"],
        "LDH": ["LDH", "LD", "乳酸脱水素酵素"],
        "T-Bil": ["T-Bil", "TB", "総ビリルビン", "総ビ"],
        "D-Bil": ["D-Bil", "DB", "直接ビリルビン", "直ビ", "直接ビ"],
        "I-Bil": ["I-Bil", "間接ビリルビン", "間接ビ", "間ビ"],
        "ChE": ["ChE", "CHE", "コリンエステラーゼ"],
    }),
    ("electrolytes", {
        "Na": ["Na", "ナトリウム"],
        "K": ["K", "カリウム"],
        "Cl": ["Cl", "クロール"],
        "Ca": ["Ca", "カルシウム"],
        "IP": ["IP", "P", "リン", "無機リン"],
        "Mg": ["Mg", "マグネシウム"],
        "Fe": ["Fe", "鉄", "血清鉄"],
        "補正Ca": ["補正Ca", "補正カルシウム"],
    }),
    ("hematology", {
        "WBC": ["WBC", "白血球", "白血球数"],
        "RBC": ["RBC", "赤血球", "赤血球数"],
        "Hb": ["Hb", "HGB", "ヘモグロビン", "ﾍﾓｸﾞﾛﾋﾞﾝ"],
        "Hct": ["Hct", "HCT", "ヘマトクリット", "ﾍﾏﾄｸﾘｯﾄ"],
        "PLT": ["PLT", "血小板", "血小板数"],
        "MCV": ["MCV"],
        "MCH": ["MCH"],
        "MCHC": ["MCHC"],
        "Ret": ["Ret", "網赤血球"],
    }),
    ("differential", {
        "Baso": ["Baso", "好塩基球"],
        "Eosino": ["Eosino", "Eos", "好酸球"],
        "Neut": ["Neut", "Neu", "好中球", "Neut-T"],
        "Lymph": ["Lymph", "Lym", "リンパ球"],
        "Mono": ["Mono", "Mon", "単球"],
        "Seg": ["Seg", "分葉核球"],
        "Stab": ["Stab", "桿状核球"],
    }),
    ("inflammation", {
        "CRP": ["CRP", "C反応性蛋白"],
        "ESR": ["ESR", "赤沈", "血沈"],
        "PCT": ["PCT", "プロカルシトニン"],
    }),
    ("coagulation", {
        "PT": ["PT", "プロトロンビン時間"],
        "APTT": ["APTT"],
        "Fib": ["Fib", "フィブリノゲン", "Fbg"],
        "D-dimer": ["D-dimer", "Dダイマー", "DD"],
        "FDP": ["FDP"],
    }),
    ("glucose", {
        "Glu": ["Glu", "GLU", "血糖", "BS", "グルコース"],
        "HbA1c": ["HbA1c", "A1c", "ヘモグロビンA1c"],
    }),
    ("lipids", {
        "TC": ["TC", "T-Cho", "総コレステロール"],
        "TG": ["TG", "中性脂肪", "トリグリセリド"],
        "HDL": ["HDL", "HDL-C", "HDLコレステロール"],
        "LDL": ["LDL", "LDL-C", "LDLコレステロール"],
    }),
    ("cardiac", {
        "CK": ["CK", "CPK"],
        "CK-MB": ["CK-MB", "CKMB"],
        "BNP": ["BNP"],
        "NT-proBNP": ["NT-proBNP"],
    }),
    ("thyroid", {
        "TSH": ["TSH"],
        "FT3": ["FT3", "遊離T3"],
        "FT4": ["FT4", "遊離T4"],
    }),
    ("tumor_markers", {
        "CA19-9": ["CA19-9", "CA199"],
        "CA125": ["CA125"],
        "CEA": ["CEA"],
        "AFP": ["AFP"],
        "PSA": ["PSA"],
        "SCC": ["SCC"],
    }),
    ("misc", {
        "Amy": ["Amy", "AMY", "アミラーゼ"],
        "Lip": ["Lip", "リパーゼ"],
        "NH3": ["NH3", "アンモニア"],
    }),
    ("csf", {
        "CSF細胞数": ["CSF細胞数", "髄液細胞数", "細胞数", "髄液細胞", "CSF細胞"],
        "CSF蛋白": ["CSF蛋白", "髄液蛋白", "髄液タンパク", "髄液TP"],
        "CSF糖": ["CSF糖", "髄液糖", "髄液Glu"],
        "CSF-IgG": ["CSF-IgG", "髄液IgG", "CSF IgG"],
        "IgG index": ["IgG index", "IgGインデックス", "IgG Index"],
        "CSF-Alb": ["CSF-Alb", "髄液アルブミン", "髄液Alb"],
        "Qalb": ["Qalb", "Q-Alb", "アルブミン商"],
        "OCB": ["OCB", "オリゴクローナルバンド", "オリゴクローナル"],
        "MBP": ["MBP", "ミエリン塩基性蛋白", "ミエリン塩基性タンパク"],
    }),
    ("autoantibodies", {
        "抗NMDA受容体抗体": ["抗NMDA受容体抗体", "NMDA受容体抗体", "anti-NMDAR", "NMDAR抗体"],
        "抗MOG抗体": ["抗MOG抗体", "MOG抗体", "anti-MOG", "MOG-IgG"],
        "抗AQP4抗体": ["抗AQP4抗体", "AQP4抗体", "anti-AQP4", "アクアポリン4抗体"],
        "抗GAD抗体": ["抗GAD抗体", "GAD抗体", "anti-GAD", "GAD65抗体"],
        "抗VGCC抗体": ["抗VGCC抗体", "VGCC抗体", "P/Q型VGCC抗体"],
        "抗VGKC抗体": ["抗VGKC抗体", "VGKC抗体", "VGKC複合体抗体"],
        "抗LGI1抗体": ["抗LGI1抗体", "LGI1抗体", "anti-LGI1"],
        "抗CASPR2抗体": ["抗CASPR2抗体", "CASPR2抗体", "anti-CASPR2"],
        "抗Hu抗体": ["抗Hu抗体", "Hu抗体", "anti-Hu", "ANNA-1"],
        "抗Yo抗体": ["抗Yo抗体", "Yo抗体", "anti-Yo", "PCA-1"],
        "抗Ri抗体": ["抗Ri抗体", "Ri抗体", "anti-Ri", "ANNA-2"],
        "抗AMPA受容体抗体": ["抗AMPA受容体抗体", "AMPA受容体抗体", "anti-AMPAR"],
        "抗GABA-B受容体抗体": ["抗GABA-B受容体抗体", "GABA-B受容体抗体"],
        "抗GQ1b抗体": ["抗GQ1b抗体", "GQ1b抗体", "anti-GQ1b"],
        "抗GM1抗体": ["抗GM1抗体", "GM1抗体", "anti-GM1"],
        "抗GD1a抗体": ["抗GD1a抗体", "GD1a抗体"],
        "抗アセチルコリン受容体抗体": ["抗AChR抗体", "AChR抗体", "アセチルコリン受容体抗体"],
        "抗MuSK抗体": ["抗MuSK抗体", "MuSK抗体", "anti-MuSK"],
    }),
    ("cytokines", {
        "IL-6": ["IL-6", "IL6", "インターロイキン6", "インターロイキン-6"],
        "IL-2": ["IL-2", "IL2", "インターロイキン2"],
        "IL-1β": ["IL-1β", "IL-1b", "IL1β", "インターロイキン1β"],
        "IL-8": ["IL-8", "IL8", "インターロイキン8"],
        "IL-10": ["IL-10", "IL10", "インターロイキン10"],
        "TNF-α": ["TNF-α", "TNFα", "TNF-a", "TNFa", "腫瘍壊死因子"],
        "IFN-γ": ["IFN-γ", "IFNγ", "IFN-g", "インターフェロンγ"],
        "sIL-2R": ["sIL-2R", "sIL2R", "可溶性IL-2受容体", "可溶性IL-2R"],
        "ネオプテリン": ["ネオプテリン", "Neopterin"],
        "フェリチン": ["フェリチン", "Ferritin", "Fer"],
        "β2MG": ["β2MG", "β2ミクログロブリン", "β2-MG", "B2MG"],
    }),
    ("neuro_markers", {
        "NSE": ["NSE", "神経特異的エノラーゼ", "神経特異エノラーゼ"],
        "S-100β": ["S-100β", "S100β", "S-100", "S100", "S100B"],
        "GFAP": ["GFAP", "グリア線維性酸性蛋白"],
        "NfL": ["NfL", "NFL", "ニューロフィラメント軽鎖", "ニューロフィラメントL"],
        "タウ蛋白": ["タウ蛋白", "Tau", "タウ", "CSF-Tau"],
        "Aβ42": ["Aβ42", "アミロイドβ42", "Aβ1-42"],
        "Aβ40": ["Aβ40", "アミロイドβ40", "Aβ1-40"],
        "14-3-3蛋白": ["14-3-3蛋白", "14-3-3", "14-3-3タンパク"],
    }),
    ("muscle", {
        "アルドラーゼ": ["アルドラーゼ", "ALD", "Aldolase"],
        "ミオグロビン": ["ミオグロビン", "Myoglobin", "Mb"],
    }),
    ("lactate_pyruvate", {
        "Lac": ["Lac", "乳酸", "Lactate", "血中乳酸"],
        "Pyr": ["Pyr", "ピルビン酸", "Pyruvate"],
        "L/P比": ["L/P比", "L/P", "乳酸/ピルビン酸比", "乳酸ピルビン酸比"],
        "CSF乳酸": ["CSF乳酸", "髄液乳酸", "CSF-Lac"],
        "CSFピルビン酸": ["CSFピルビン酸", "髄液ピルビン酸", "CSF-Pyr"],
    }),
    ("blood_gas", {
        "pH": ["pH", "ペーハー"],
        "PaO2": ["PaO2", "pO2", "動脈血酸素分圧", "酸素分圧"],
        "PaCO2": ["PaCO2", "pCO2", "動脈血二酸化炭素分圧", "二酸化炭素分圧"],
        "HCO3": ["HCO3", "HCO3-", "重炭酸イオン", "重炭酸"],
        "BE": ["BE", "Base Excess", "ベースエクセス", "塩基過剰"],
        "SaO2": ["SaO2", "SpO2", "酸素飽和度", "動脈血酸素飽和度"],
        "AG": ["AG", "Anion Gap", "アニオンギャップ"],
        "A-aDO2": ["A-aDO2", "AaDO2", "肺胞気動脈血酸素分圧較差"],
    }),
    ("urinalysis", {
        "尿pH": ["尿pH", "U-pH", "尿ペーハー"],
        "尿比重": ["尿比重", "U-SG", "SG"],
        "尿蛋白": ["尿蛋白", "U-Pro", "U-TP", "尿タンパク"],
        "尿蛋白定量": ["尿蛋白定量", "尿中蛋白", "U-Pro定量"],
        "尿糖": ["尿糖", "U-Glu", "U-GLU"],
        "尿潜血": ["尿潜血", "U-BLD", "U-OB", "尿中潜血"],
        "尿ケトン": ["尿ケトン", "U-Ket", "ケトン体"],
        "尿ビリルビン": ["尿ビリルビン", "U-Bil"],
        "尿ウロビリノーゲン": ["尿ウロビリノーゲン", "U-Uro", "ウロビリノーゲン"],
        "尿亜硝酸塩": ["尿亜硝酸塩", "U-NIT", "亜硝酸"],
        "尿白血球": ["尿白血球", "U-WBC", "U-Leu", "尿中白血球"],
        "尿赤血球": ["尿赤血球", "U-RBC", "尿中赤血球"],
        "尿円柱": ["尿円柱", "円柱"],
        "尿細菌": ["尿細菌", "U-Bact", "細菌"],
        "NAG": ["NAG", "U-NAG", "尿中NAG"],
        "β2MG(尿)": ["β2MG(尿)", "尿中β2MG", "U-β2MG", "U-B2MG"],
        "Alb/Cre比": ["Alb/Cre比", "UACR", "尿アルブミン/クレアチニン比", "ACR"],
        "尿中アルブミン": ["尿中アルブミン", "U-Alb", "尿アルブミン"],
        "U-Cr": ["U-Cr", "尿クレアチニン", "尿中クレアチニン"],
        "Ccr(24時間)": ["Ccr(24時間)", "24時間Ccr", "クレアチニンクリアランス"],
        "尿浸透圧": ["尿浸透圧", "U-Osm", "U-OSM"],
        "尿Na": ["尿Na", "U-Na", "尿中Na", "尿中ナトリウム"],
        "尿K": ["尿K", "U-K", "尿中K", "尿中カリウム"],
        "尿Cl": ["尿Cl", "U-Cl", "尿中Cl", "尿中クロール"],
        "FENa": ["FENa", "ナトリウム排泄分画"],
    }),
]

# canonical 단위 (미추적 항목은 누락 → 빈 문자열)
LAB_ITEM_UNITS: Dict[str, str] = {
    # 혈구
    "WBC": "/μL", "RBC": "×10⁴/μL", "Hb": "g/dL", "Hct": "%", "PLT": "×10⁴/μL",
    "MCV": "fL", "MCH": "pg", "MCHC": "%", "Ret": "%",
    "Baso": "%", "Eosino": "%", "Neut": "%", "Lymph": "%", "Mono": "%",
    # 염증
    "CRP": "mg/dL", "ESR": "mm/h", "PCT": "ng/mL",
    # 간기능
    "AST": "U/L", "ALT": "U/L", "γ-GTP": "U/L", "ALP": "U/L", "LDH": "U/L",
    "T-Bil": "mg/dL", "D-Bil": "mg/dL", "I-Bil": "mg/dL", "ChE": "U/L",
    # 신기능
    "BUN": "mg/dL", "Cr": "mg/dL", "eGFR": "mL/min/1.73m²", "Ccr": "mL/min", "UA": "mg/dL",
    # 전해질
    "Na": "mEq/L", "K": "mEq/L", "Cl": "mEq/L", "Ca": "mg/dL", "IP": "mg/dL",
    "Mg": "mg/dL", "Fe": "μg/dL", "補正Ca": "mg/dL",
    # 단백
    "TP": "g/dL", "Alb": "g/dL", "A/G": "",
    # 당대사
    "Glu": "mg/dL", "HbA1c": "%",
    # 지질
    "TC": "mg/dL", "TG": "mg/dL", "HDL": "mg/dL", "LDL": "mg/dL",
    # 응고
    "PT": "秒", "APTT": "秒", "Fib": "mg/dL", "D-dimer": "μg/mL", "FDP": "μg/mL",
    # 심근
    "CK": "U/L", "CK-MB": "U/L", "BNP": "pg/mL", "NT-proBNP": "pg/mL",
    # 갑상선
    "TSH": "μIU/mL", "FT3": "pg/mL", "FT4": "ng/dL",
    # 종양표지자
    "CA19-9": "U/mL", "CA125": "U/mL", "CEA": "ng/mL", "AFP": "ng/mL", "PSA": "ng/mL",
    "SCC": "ng/mL",
    # 효소 등
    "Amy": "U/L", "Lip": "U/L", "NH3": "μg/dL",
    # 수액(CSF)
    "CSF細胞数": "/μL", "CSF蛋白": "mg/dL", "CSF糖": "mg/dL",
    "CSF-IgG": "mg/dL", "IgG index": "", "CSF-Alb": "mg/dL", "Qalb": "",
    "OCB": "", "MBP": "pg/mL",
    # 자가항체
    "抗NMDA受容体抗体": "", "抗MOG抗体": "", "抗AQP4抗体": "",
    "抗GAD抗体": "U/mL", "抗VGCC抗体": "", "抗VGKC抗体": "",
    "抗LGI1抗体": "", "抗CASPR2抗体": "",
    "抗Hu抗体": "", "抗Yo抗体": "", "抗Ri抗体": "",
    "抗AMPA受容体抗体": "", "抗GABA-B受容体抗体": "",
    "抗GQ1b抗体": "", "抗GM1抗体": "", "抗GD1a抗体": "",
    "抗アセチルコリン受容体抗体": "nmol/L", "抗MuSK抗体": "",
    # 사이토카인
    "IL-6": "pg/mL", "IL-2": "pg/mL", "IL-1β": "pg/mL", "IL-8": "pg/mL", "IL-10": "pg/mL",
    "TNF-α": "pg/mL", "IFN-γ": "pg/mL",
    "sIL-2R": "U/mL", "ネオプテリン": "nmol/L",
    "フェリチン": "ng/mL", "β2MG": "mg/L",
    # 신경 마커
    "NSE": "ng/mL", "S-100β": "pg/mL", "GFAP": "pg/mL", "NfL": "pg/mL",
    "タウ蛋白": "pg/mL", "Aβ42": "pg/mL", "Aβ40": "pg/mL", "14-3-3蛋白": "",
    # 근육
    "アルドラーゼ": "U/L", "ミオグロビン": "ng/mL",
    # 젖산/피루브산
    "Lac": "mmol/L", "Pyr": "mg/dL", "L/P比": "",
    "CSF乳酸": "mmol/L", "CSFピルビン酸": "mg/dL",
    # 혈액가스
    "pH": "", "PaO2": "mmHg", "PaCO2": "mmHg",
    "HCO3": "mEq/L", "BE": "mEq/L", "SaO2": "%",
    "AG": "mEq/L", "A-aDO2": "mmHg",
    # 요검사
    "尿pH": "", "尿比重": "", "尿蛋白": "", "尿蛋白定量": "mg/日",
    "尿糖": "", "尿潜血": "", "尿ケトン": "", "尿ビリルビン": "",
    "尿ウロビリノーゲン": "", "尿亜硝酸塩": "", "尿白血球": "/HPF", "尿赤血球": "/HPF",
    "尿円柱": "/LPF", "尿細菌": "",
    "NAG": "U/L", "β2MG(尿)": "μg/L",
    "Alb/Cre比": "mg/gCr", "尿中アルブミン": "mg/日",
    "U-Cr": "mg/dL", "Ccr(24時間)": "mL/min",
    "尿浸透圧": "mOsm/kg", "尿Na": "mEq/L", "尿K": "mEq/L", "尿Cl": "mEq/L",
    "FENa": "%",
}

# 음수 값이 정상적으로 나올 수 있는 항목 (염기과잉)
SIGNED_ITEMS = frozenset({"BE"})


__all__ = [
    "LabItemCategory",
    "LAB_ITEM_CATEGORIES",
    "LAB_ITEM_UNITS",
    "SIGNED_ITEMS",
]
