"""Bundled example snippets with typical API client mistakes."""

from snipcheck.models import Language

SAMPLES: dict[Language, str] = {
  Language.JAVASCRIPT: """\
// BAD - No error handling
const callMinimaxAPI = async (messages) => {
  const response = await fetch('https://api.minimax.chat/v1/text/chatcompletion_v2', {
    method: 'POST',
    headers: {
      'Content-Type': 'application/json',
      'Authorization': 'Bearer YOUR_API_KEY_HERE'
    },
    body: JSON.stringify({
      model: 'MiniMax-M2.1',
      messages: messages
    })
  });
  return response.json();
}

// Usage with hardcoded API key
const messages = [{role: 'user', content: 'Hello'}];
callMinimaxAPI(messages);

// BAD - No retry logic
async function processMessages(msgs) {
  for (const msg of msgs) {
    await callMinimaxAPI(msg);
  }
}

// BAD - No rate limiting
for (let i = 0; i < 100; i++) {
  callMinimaxAPI(createMessage(i));
}""",
  Language.TYPESCRIPT: """\
// BAD - Missing types
interface Message {
  role: string;
  content: string;
}

const callAPI = async (messages: any[]) => {
  const response = await fetch('https://api.minimax.chat/v1/text/chatcompletion_v2', {
    method: 'POST',
    headers: {
      'Content-Type': 'application/json',
      'Authorization': 'Bearer YOUR_API_KEY'
    },
    body: JSON.stringify({ model: 'MiniMax-M2.1', messages })
  });
  return response.json();
}

// BAD - Any type usage
const data: any = await callAPI([]);
console.log(data.result.content);""",
  Language.PYTHON: """\
# BAD - No error handling
import requests

API_KEY = "YOUR_API_KEY_HERE"  # Hardcoded secret!

def call_minimax(messages):
    response = requests.post(
        "https://api.minimax.chat/v1/text/chatcompletion_v2",
        headers={
            "Authorization": f"Bearer {API_KEY}",
            "Content-Type": "application/json"
        },
        json={"model": "MiniMax-M2.1", "messages": messages}
    )
    return response.json()

# BAD - No retry logic
def process_batch(messages):
    results = []
    for msg in messages:
        result = call_minimax(msg)
        results.append(result)
    return results""",
  Language.GO: """\
// BAD - No error handling
package main

import (
    "fmt"
    "net/http"
    "io/ioutil"
)

const API_KEY = "YOUR_API_KEY_HERE" // Hardcoded!

func callMinimax(messages []map[string]string) {
    jsonData := fmt.Sprintf(`{"model": "MiniMax-M2.1", "messages": %v}`, messages)
    resp, _ := http.Post(
        "https://api.minimax.chat/v1/text/chatcompletion_v2",
        "application/json",
        strings.NewReader(jsonData))
    defer resp.Body.Close()
    body, _ := ioutil.ReadAll(resp.Body)
    fmt.Println(string(body))
}""",
}


def get_sample(language: Language) -> str:
  """Sample for a language, falling back to the JavaScript one."""
  return SAMPLES.get(language, SAMPLES[Language.JAVASCRIPT])
