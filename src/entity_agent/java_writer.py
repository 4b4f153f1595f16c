from __future__ import annotations
from pathlib import Path
from entity_agent.model import ColumnDescription, JavaType, TableDescription
from entity_agent.naming import capitalize
from entity_agent.options import GenerationOptions

INDENT = "    "

JPA_IMPORT = "javax.persistence.*"
LOMBOK_IMPORTS = ("lombok.Data", "lombok.NoArgsConstructor", "lombok.AllArgsConstructor")
JACKSON_IMPORT = "com.fasterxml.jackson.annotation.JsonProperty"

# 실제로 쓰인 타입만 import
TYPE_IMPORTS = {
    JavaType.BIG_DECIMAL: "java.math.BigDecimal",
    JavaType.LOCAL_DATE: "java.time.LocalDate",
    JavaType.LOCAL_DATE_TIME: "java.time.LocalDateTime",
    JavaType.LOCAL_TIME: "java.time.LocalTime",
}

def _java_string(value: str) -> str:
    # 어노테이션 속성값은 Java 문자열 리터럴
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'

def collect_imports(table: TableDescription, options: GenerationOptions) -> list[str]:
    imports: set[str] = set()
    if options.jpa:
        imports.add(JPA_IMPORT)
    if options.lombok:
        imports.update(LOMBOK_IMPORTS)
    if options.jackson:
        imports.add(JACKSON_IMPORT)
    for col in table.columns:
        if col.java_type in TYPE_IMPORTS:
            imports.add(TYPE_IMPORTS[col.java_type])
    return sorted(imports)

def class_annotations(table: TableDescription, options: GenerationOptions) -> list[str]:
    # 순서 고정: JPA → Lombok
    lines: list[str] = []
    if options.jpa:
        lines.append("@Entity")
        lines.append(f"@Table(name = {_java_string(table.name)})")
    if options.lombok:
        lines.append("@Data")
        lines.append("@NoArgsConstructor")
        lines.append("@AllArgsConstructor")
    return lines

def field_lines(col: ColumnDescription, options: GenerationOptions) -> list[str]:
    lines: list[str] = []
    renamed = col.java_name != col.name

    if col.pk and options.jpa:
        lines.append("@Id")
        if col.auto_increment:
            lines.append("@GeneratedValue(strategy = GenerationType.IDENTITY)")

    if options.jpa and renamed:
        attrs = f"name = {_java_string(col.name)}"
        if not col.nullable:
            attrs += ", nullable = false"
        lines.append(f"@Column({attrs})")

    if options.jackson and renamed:
        lines.append(f"@JsonProperty({_java_string(col.name)})")

    lines.append(f"private {col.java_type.value} {col.java_name};")
    return [INDENT + ln for ln in lines]

def accessor_lines(col: ColumnDescription) -> list[str]:
    t = col.java_type.value
    n = col.java_name
    cap = capitalize(n)
    return [
        "",
        f"{INDENT}public {t} get{cap}() {{",
        f"{INDENT * 2}return {n};",
        f"{INDENT}}}",
        "",
        f"{INDENT}public void set{cap}({t} {n}) {{",
        f"{INDENT * 2}this.{n} = {n};",
        f"{INDENT}}}",
    ]

def to_java(table: TableDescription, options: GenerationOptions | None = None) -> str:
    options = options or GenerationOptions()
    lines: list[str] = []

    imports = collect_imports(table, options)
    if imports:
        lines.extend(f"import {imp};" for imp in imports)
        lines.append("")

    lines.extend(class_annotations(table, options))
    lines.append(f"public class {table.class_name} {{")
    lines.append("")

    for idx, col in enumerate(table.columns):
        lines.extend(field_lines(col, options))
        if idx < len(table.columns) - 1:
            lines.append("")

    if options.effective_generate_accessors:
        for col in table.columns:
            lines.extend(accessor_lines(col))

    lines.append("}")
    lines.append("")
    return "\n".join(lines)

def write_java(table: TableDescription, out_dir: Path, options: GenerationOptions | None = None) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / f"{table.class_name}.java"
    out_path.write_text(to_java(table, options), encoding="utf-8")
    return out_path
