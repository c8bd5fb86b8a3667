"""数据处理模块."""

"""
fillin_report/data/
├── __init__.py
├── models.py                 # 数据模型定义
├── response_tokenizer.py     # 用户答案分词
├── interaction_options.py    # 元数据解析（备选答案、大小写敏感）
├── answer_matcher.py         # 答案匹配与渲染
├── blank_alignment.py        # 占位符/备选答案/用户答案对齐
├── placeholder_detector/     # 占位符检测器
│   ├── __init__.py
│   ├── base_detector.py
│   ├── marker.py
│   └── underline_detector.py
├── placeholder_filler.py     # 占位符填充
├── report_generator.py       # 报告外壳
└── report_io.py              # 输入输出
"""
