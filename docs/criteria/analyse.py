analyse_criteria_description = """
Parse a class generation criteria line and reconcile the class counts with the declared total.

### Request Body

- `criteria` (String):
    Criteria line made of `<count><class>` tokens. `S` is the total number of students,
    every other letter is a class name. The total and the classes may be separated by `-`.
    ```json
    {
        "criteria": "10S - 3A2B1C"
    }
    ```
    Only the first criteria run in the line is used.

### Behaviour

- If the class counts fit into the total, they are returned unchanged together with
  `rand`, the number of students left unassigned.
- If the class counts exceed the total, each class is merged with the first class whose
  criteria overlap (age, course and mark ranges). The merged class is named after both
  classes (e.g. `AB`) and takes the smaller count; the excess stays on the original class.
- If the counts still exceed the total, the request fails with `422`.

### Response

```json
{
    "criteria": {"S": 10, "A": 3, "B": 2, "C": 1, "rand": 4},
    "sorted": "10S3A2B1C"
}
```

### Errors

- `422`: `{"code": "CONFLICTS_INPUT_CRITERIA", "message": "Combined criteria has conflicts."}`
"""

class_criteria_description = """
Return the criteria of a class, either a configured class (e.g. `A`) or a class created by
combining two classes during analysis (e.g. `AB`). Returns `404` for an unknown class.
"""
